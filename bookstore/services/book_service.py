"""Book collection use cases (list, lookup, create, delete)."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Mapping

from bookstore.domain.books import (
    AUTHOR_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
    YEAR_MIN,
    clean_text,
    coerce_year,
    find_duplicate,
    is_valid_author,
    is_valid_book_id,
    is_valid_title,
    is_valid_year,
    new_book_id,
)
from bookstore.repositories.json_storage import BookStore, StorageError

logger = logging.getLogger(__name__)

READ_FAILURE = "Error reading data"
CREATE_FAILURE = "Error creating book"
DELETE_FAILURE = "Error deleting book"
DELETED_MESSAGE = "Book deleted successfully"


class BookError(Exception):
    """Base exception for book workflows."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidIdentifierError(BookError):
    """Raised when a path id is not a valid UUID."""


class BookValidationError(BookError):
    """Raised when a create request has missing or out-of-range fields."""


class BookConflictError(BookError):
    """Raised when a book with the same title and year already exists."""


class BookNotFoundError(BookError):
    """Raised when no record matches the requested id."""


class StorageFailureError(BookError):
    """Raised when the record store cannot be read or written."""


class BookService:
    """Handler set operating on an injected BookStore."""

    def __init__(self, store: BookStore, *, current_year: Callable[[], int] | None = None) -> None:
        self.store = store
        self._current_year = current_year or (lambda: date.today().year)

    def _check_id(self, book_id: Any) -> str:
        if not is_valid_book_id(book_id):
            logger.debug("Rejected invalid book id %r", book_id)
            raise InvalidIdentifierError("Invalid id")
        return book_id

    def _load(self, failure_message: str) -> list[dict]:
        try:
            return self.store.load()
        except StorageError as exc:
            logger.exception("Failed to load book collection")
            raise StorageFailureError(failure_message) from exc

    def _save(self, books: list[dict], failure_message: str) -> None:
        try:
            self.store.save(books)
        except StorageError as exc:
            logger.exception("Failed to save book collection")
            raise StorageFailureError(failure_message) from exc

    def list_books(self) -> list[dict]:
        return self._load(READ_FAILURE)

    def get_book(self, book_id: str) -> dict:
        book_id = self._check_id(book_id)
        for book in self._load(READ_FAILURE):
            if book.get("id") == book_id:
                return book
        raise BookNotFoundError("Book not found")

    def validate_new_book(self, payload: Any) -> dict:
        """
        Check a create request body and return the cleaned fields.

        Rules are applied in order: no client id, title/author present,
        title length 2-100, author length >= 5, optional year in
        [1900, current year]. The first failing rule wins.
        """
        if not isinstance(payload, Mapping):
            raise BookValidationError("Request body must be a JSON object")
        if "id" in payload:
            raise BookValidationError("Field 'id' is assigned by the server")

        title = payload.get("title")
        author = payload.get("author")
        if not title or not author:
            raise BookValidationError("Missing required fields: title and author")

        title = clean_text(title)
        author = clean_text(author)
        if not is_valid_title(title):
            raise BookValidationError(
                f"title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
            )
        if not is_valid_author(author):
            raise BookValidationError(f"author must be at least {AUTHOR_MIN_LENGTH} characters")

        fields: dict = {"title": title, "author": author}
        if "year" in payload:
            current_year = self._current_year()
            year = coerce_year(payload["year"])
            if year is None or not is_valid_year(year, current_year):
                raise BookValidationError(f"year must be an integer between {YEAR_MIN} and {current_year}")
            fields["year"] = year
        return fields

    def create_book(self, payload: Any) -> dict:
        try:
            fields = self.validate_new_book(payload)
        except BookValidationError as exc:
            logger.debug("Rejected create request: %s", exc.message)
            raise

        with self.store.lock:
            books = self._load(CREATE_FAILURE)
            year = fields.get("year")
            if year is not None and find_duplicate(books, fields["title"], year) is not None:
                raise BookConflictError("A book with the same title and year already exists")

            book = {"id": new_book_id(), **fields}
            books.append(book)
            self._save(books, CREATE_FAILURE)

        logger.info("Created book %s (%s)", book["id"], book["title"])
        return book

    def delete_book(self, book_id: str) -> str:
        book_id = self._check_id(book_id)
        with self.store.lock:
            books = self._load(DELETE_FAILURE)
            index = next((i for i, book in enumerate(books) if book.get("id") == book_id), None)
            if index is None:
                raise BookNotFoundError("Book not found")
            del books[index]
            self._save(books, DELETE_FAILURE)

        logger.info("Deleted book %s", book_id)
        return DELETED_MESSAGE
