"""Domain helpers for book identifiers and field validation."""
from __future__ import annotations

import math
import re
import uuid
from typing import Any, Mapping

# RFC 9562 versions 1-8 with the RFC variant, plus the nil and max UUIDs
BOOK_ID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000"
    r"|ffffffff-ffff-ffff-ffff-ffffffffffff",
    re.IGNORECASE,
)
TITLE_MIN_LENGTH = 2
TITLE_MAX_LENGTH = 100
AUTHOR_MIN_LENGTH = 5
YEAR_MIN = 1900


def is_valid_book_id(value: Any) -> bool:
    """Return True when value is a canonical hyphenated UUID string."""
    if not isinstance(value, str):
        return False
    return bool(BOOK_ID_PATTERN.fullmatch(value))


def new_book_id() -> str:
    return str(uuid.uuid4())


def clean_text(value: Any) -> str:
    return str(value).strip()


def is_valid_title(value: str) -> bool:
    return TITLE_MIN_LENGTH <= len(value) <= TITLE_MAX_LENGTH


def is_valid_author(value: str) -> bool:
    return len(value) >= AUTHOR_MIN_LENGTH


def coerce_year(value: Any) -> int | None:
    """
    Convert a client supplied year into an int.

    Accepts ints, integral floats and numeric strings ("2020", " 2020.0 ").
    Returns None when the value is not an integral number; booleans are
    never treated as numbers.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                return None
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
    return None


def is_valid_year(value: int, current_year: int) -> bool:
    return YEAR_MIN <= value <= current_year


def duplicate_key(title: Any, year: Any) -> tuple[str, Any]:
    """Normalized (title, year) pair used for conflict detection."""
    return clean_text(title).lower(), year


def find_duplicate(books: list[Mapping[str, Any]], title: str, year: int) -> Mapping[str, Any] | None:
    """Return the first record sharing the normalized title and the same year."""
    key = duplicate_key(title, year)
    for book in books:
        if book.get("year") is None or "title" not in book:
            continue
        if duplicate_key(book["title"], book["year"]) == key:
            return book
    return None
