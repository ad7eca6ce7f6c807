#!/usr/bin/env python3
"""
Add a book straight to the JSON data file, with the same rules as the API.

Usage:
  python scripts/add_book.py --title "Dune" --author "Frank Herbert" [--year 1965] [--data-file data/books.json]
"""
from __future__ import annotations

import argparse
import sys

from bookstore.core.config import get_settings
from bookstore.repositories.json_storage import JsonFileStore
from bookstore.services.book_service import BookError, BookService


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Add a book to the collection file")
    ap.add_argument("--title", required=True, help="Title (2-100 characters)")
    ap.add_argument("--author", required=True, help="Author (at least 5 characters)")
    ap.add_argument("--year", help="Publication year (optional)")
    ap.add_argument("--data-file", help="JSON file to write (default: BOOKS_DATA_FILE)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    data_file = args.data_file or get_settings().data_file
    svc = BookService(JsonFileStore(data_file))

    payload = {"title": args.title, "author": args.author}
    if args.year is not None:
        payload["year"] = args.year
    try:
        book = svc.create_book(payload)
    except BookError as exc:
        sys.stderr.write(f"Error: {exc.message}\n")
        return 1

    print("OK: book added")
    print(f"  ID: {book['id']}")
    print(f"  Title: {book['title']}")
    print(f"  Author: {book['author']}")
    if "year" in book:
        print(f"  Year: {book['year']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
