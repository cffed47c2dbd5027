import argparse
import os

import requests


def check_range_summary(url, pdf_path, start, stop, title, author, subject, genre):
    with open(pdf_path, "rb") as f:
        files = {"document": (os.path.basename(pdf_path), f, "application/pdf")}
        data = {
            "startPage": start,
            "stopPage": stop,
            "bookTitle": title,
            "bookAuthor": author,
            "bookSubject": subject,
            "genre": genre,
        }
        response = requests.post(url, files=files, data=data, timeout=300)

    print(f"HTTP {response.status_code}")
    if response.headers.get("content-type", "").startswith("application/json"):
        body = response.json()
        print(f"source={body.get('source')} tokens={body.get('tokens', '-')}")
        summary = str(body.get("summary", ""))
        print(summary[:800] + ("..." if len(summary) > 800 else ""))
    else:
        print(response.text)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Post a PDF page range to a running summarizer.")
    parser.add_argument("--url", default="http://localhost:3000/")
    parser.add_argument("--pdf", default="data/sample-book.pdf")
    parser.add_argument("--start", default="1")
    parser.add_argument("--stop", default="3")
    parser.add_argument("--title", default="Sample Book")
    parser.add_argument("--author", default="Unknown")
    parser.add_argument("--subject", default="General")
    parser.add_argument("--genre", default="Non-fiction")
    args = parser.parse_args()

    if not os.path.exists(args.pdf):
        raise SystemExit(f"PDF not found: {args.pdf}")

    check_range_summary(args.url, args.pdf, args.start, args.stop,
                        args.title, args.author, args.subject, args.genre)
