"""
Persistence adapters.

These modules encapsulate how the book collection is stored/retrieved (today a
single JSON file). Services depend on the BookStore interface rather than
touching the JSON file, so tests can hand in a MemoryStore instead.
"""

from bookstore.repositories.json_storage import BookStore, JsonFileStore, MemoryStore, StorageError

__all__ = ["BookStore", "JsonFileStore", "MemoryStore", "StorageError"]
