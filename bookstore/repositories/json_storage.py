"""
JSON-based persistence adapter for the book collection.

The whole collection lives in one JSON array. It is read in full on every
load() and rewritten in full on every save(); there is no incremental update
and no index. save() writes in place (no temp file + rename), so a crash in
the middle of a write can leave a truncated file behind.

Each store owns a re-entrant lock. Callers that do load -> mutate -> save hold
it for the whole cycle; the store itself never takes it.
"""

from __future__ import annotations

import copy
import json
import logging
import threading
from pathlib import Path
from typing import Any, ContextManager, Protocol

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the collection cannot be read or written."""


class BookStore(Protocol):
    lock: ContextManager[Any]

    def load(self) -> list[dict]:
        ...

    def save(self, books: list[dict]) -> None:
        ...


def _check_collection(data: Any, source: str) -> list[dict]:
    if not isinstance(data, list):
        raise StorageError(f"{source}: expected a JSON array, got {type(data).__name__}")
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise StorageError(f"{source}: entry {index} is not an object")
    return data


class JsonFileStore:
    """Flat-file record store backed by a single JSON document."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.lock = threading.RLock()

    def load(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Could not read %s: %s", self.path, exc)
            raise StorageError(f"cannot read {self.path}") from exc
        except json.JSONDecodeError as exc:
            logger.error("Malformed JSON in %s: %s", self.path, exc)
            raise StorageError(f"malformed JSON in {self.path}") from exc
        try:
            return _check_collection(data, str(self.path))
        except StorageError as exc:
            logger.error("%s", exc)
            raise

    def save(self, books: list[dict]) -> None:
        try:
            payload = json.dumps(books, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as exc:
            logger.error("Collection is not JSON serializable: %s", exc)
            raise StorageError("collection is not JSON serializable") from exc
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            logger.error("Could not write %s: %s", self.path, exc)
            raise StorageError(f"cannot write {self.path}") from exc
        logger.debug("Wrote %d books to %s", len(books), self.path)


class MemoryStore:
    """In-process store with the same contract; handy for tests and embedding."""

    def __init__(self, books: list[dict] | None = None) -> None:
        self._books = _check_collection(copy.deepcopy(books or []), "memory")
        self.lock = threading.RLock()

    def load(self) -> list[dict]:
        return copy.deepcopy(self._books)

    def save(self, books: list[dict]) -> None:
        self._books = _check_collection(copy.deepcopy(books), "memory")
