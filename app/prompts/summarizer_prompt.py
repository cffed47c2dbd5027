BOOK_RANGE_TEMPLATE = """
Book Title: {book_title}
Book Author: {book_author}
Book Subject: {book_subject}
Genre: {genre}
Start Page: {start_page}
End Page: {stop_page}

Please summarize the following text and return the summary as a JSON object with a "summary" key \
(summary should be at least 300 words long and note what is provided is not the full book; \
you are simply summarizing between a page range. In the summary text, mention the page range, \
e.g., "from page {start_page} to page {stop_page}, here is the summary"):

{text}
"""


def build_summary_prompt(book_title, book_author, book_subject, genre,
                         start_page, stop_page, extracted_text: str) -> str:
    """
    Fill the book-range template. Metadata is inserted as given, so a field
    the client left out shows up as "None".
    """
    return BOOK_RANGE_TEMPLATE.format(
        book_title=book_title,
        book_author=book_author,
        book_subject=book_subject,
        genre=genre,
        start_page=start_page,
        stop_page=stop_page,
        text=extracted_text,
    )
