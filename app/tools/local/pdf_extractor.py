import asyncio
from typing import List, Tuple

import fitz  # PyMuPDF

from app.errors import ExtractionError, InvalidRangeError
from app.utils.logger import get_logger

logger = get_logger(__name__)

# Pages are flattened into one stream separated by a blank line; the same
# delimiter is used afterwards to cut the stream back into blocks.
BLOCK_DELIMITER = "\n\n"


def parse_page_number(value) -> int:
    """Convert a form value such as "3" into a page number."""
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidRangeError(value, None) from None


def validate_page_range(start_page: int, stop_page: int, total_pages: int) -> None:
    if start_page < 1 or stop_page > total_pages or start_page > stop_page:
        raise InvalidRangeError(start_page, stop_page, total_pages)


def read_pdf_text(file_bytes: bytes) -> Tuple[int, str]:
    """
    Parse PDF bytes and return (page count, flattened text).
    """
    if not file_bytes:
        raise ExtractionError("No document was uploaded or the document is empty.")
    try:
        with fitz.open(stream=file_bytes, filetype="pdf") as doc:
            # noinspection PyUnresolvedReferences
            pages = [page.get_text().rstrip() for page in doc]
    except Exception as e:
        raise ExtractionError(f"Could not read PDF: {e}") from e
    return len(pages), BLOCK_DELIMITER.join(pages)


def split_into_blocks(text: str) -> List[str]:
    # Blank lines approximate page boundaries; paragraphs inside a page also
    # produce extra blocks, so this is a heuristic, not a page map.
    return text.split(BLOCK_DELIMITER)


def extract_page_range(file_bytes: bytes, start_page: int, stop_page: int) -> str:
    """
    Return the text of blocks start_page..stop_page (1-indexed, inclusive),
    joined with newlines.

    Raises InvalidRangeError when the range falls outside the document and
    ExtractionError when the bytes are not a readable PDF.
    """
    total_pages, text = read_pdf_text(file_bytes)
    validate_page_range(start_page, stop_page, total_pages)

    blocks = split_into_blocks(text)[start_page - 1:stop_page]
    logger.info(f"Extracted blocks {start_page}-{stop_page} of a {total_pages}-page document "
                f"({len(blocks)} blocks)")
    return "\n".join(blocks)


async def extract_page_range_async(file_bytes: bytes, start_page: int, stop_page: int) -> str:
    # PyMuPDF is blocking; keep the event loop free while it parses.
    return await asyncio.to_thread(extract_page_range, file_bytes, start_page, stop_page)
