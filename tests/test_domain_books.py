from __future__ import annotations

import uuid

import pytest

from bookstore.domain.books import (
    coerce_year,
    duplicate_key,
    find_duplicate,
    is_valid_author,
    is_valid_book_id,
    is_valid_title,
    is_valid_year,
    new_book_id,
)


def test_book_id_accepts_canonical_uuid_only():
    assert is_valid_book_id(str(uuid.uuid4()))
    assert is_valid_book_id(str(uuid.uuid4()).upper())
    assert not is_valid_book_id("not-a-uuid")
    assert not is_valid_book_id(uuid.uuid4().hex)
    assert not is_valid_book_id("{" + str(uuid.uuid4()) + "}")
    assert not is_valid_book_id("")
    assert not is_valid_book_id(None)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("00000000-0000-0000-0000-000000000000", True),
        ("FFFFFFFF-FFFF-FFFF-FFFF-FFFFFFFFFFFF", True),
        ("6ba7b810-9dad-11d1-80b4-00c04fd430c8", True),
        ("017f22e2-79b0-7cc3-98c4-dc0c0c07398f", True),
        ("00000000-0000-0000-0000-000000000001", False),
        ("6ba7b810-9dad-01d1-80b4-00c04fd430c8", False),
        ("6ba7b810-9dad-91d1-80b4-00c04fd430c8", False),
        ("6ba7b810-9dad-41d1-c0b4-00c04fd430c8", False),
    ],
)
def test_book_id_requires_known_version_and_variant(value, expected):
    assert is_valid_book_id(value) is expected


def test_new_book_id_is_unique_uuid():
    ids = {new_book_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(is_valid_book_id(value) for value in ids)


@pytest.mark.parametrize(
    "value, expected",
    [
        (2020, 2020),
        (2020.0, 2020),
        ("2020", 2020),
        (" 1999 ", 1999),
        ("2020.0", 2020),
        (2020.5, None),
        ("abc", None),
        ("", None),
        (True, None),
        ([2020], None),
        (float("nan"), None),
        (None, None),
    ],
)
def test_coerce_year(value, expected):
    assert coerce_year(value) == expected


def test_field_bounds():
    assert not is_valid_title("a")
    assert is_valid_title("ab")
    assert is_valid_title("x" * 100)
    assert not is_valid_title("x" * 101)
    assert not is_valid_author("Anne")
    assert is_valid_author("Homer")
    assert not is_valid_year(1899, 2024)
    assert is_valid_year(1900, 2024)
    assert is_valid_year(2024, 2024)
    assert not is_valid_year(2025, 2024)


def test_find_duplicate_normalizes_title_and_requires_year():
    books = [
        {"id": "a", "title": "  Foo ", "author": "Writer", "year": 2020},
        {"id": "b", "title": "Bar", "author": "Writer"},
    ]
    assert duplicate_key(" FOO ", 2020) == ("foo", 2020)
    assert find_duplicate(books, "foo", 2020)["id"] == "a"
    assert find_duplicate(books, "foo", 2021) is None
    assert find_duplicate(books, "bar", 2020) is None
