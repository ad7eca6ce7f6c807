"""
Tests for the flat-file and in-memory record stores.
"""
from __future__ import annotations

import json

import pytest

from bookstore.repositories.json_storage import JsonFileStore, MemoryStore, StorageError


def test_missing_file_loads_empty_collection(tmp_path):
    store = JsonFileStore(tmp_path / "absent.json")
    assert store.load() == []


def test_save_then_load_rewrites_whole_document(tmp_path):
    path = tmp_path / "nested" / "books.json"
    store = JsonFileStore(path)
    books = [{"id": "1", "title": "Café", "author": "Someone"}]
    store.save(books)

    assert json.loads(path.read_text(encoding="utf-8")) == books
    assert "Café" in path.read_text(encoding="utf-8")
    assert store.load() == books

    store.save([])
    assert store.load() == []


@pytest.mark.parametrize("content", ["{not json", '{"id": 1}', "[1, 2]"])
def test_malformed_file_raises_storage_error(tmp_path, content):
    path = tmp_path / "books.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(StorageError):
        JsonFileStore(path).load()


def test_unreadable_target_raises_storage_error(tmp_path):
    # a directory cannot be opened or written as a file
    store = JsonFileStore(tmp_path)
    with pytest.raises(StorageError):
        store.load()
    with pytest.raises(StorageError):
        store.save([])


def test_unserializable_collection_raises_storage_error(tmp_path):
    store = JsonFileStore(tmp_path / "books.json")
    with pytest.raises(StorageError):
        store.save([{"id": object()}])


def test_memory_store_does_not_alias_callers():
    seed = [{"id": "1", "title": "Foo", "author": "Writer"}]
    store = MemoryStore(seed)
    seed[0]["title"] = "changed"

    loaded = store.load()
    assert loaded[0]["title"] == "Foo"
    loaded.append({"id": "2"})
    assert len(store.load()) == 1
