from __future__ import annotations

import sys
import threading
from pathlib import Path

import pytest

# Makes the bookstore package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from bookstore.app import create_app  # noqa: E402
from bookstore.core import config as core_config  # noqa: E402
from bookstore.repositories.json_storage import JsonFileStore, MemoryStore  # noqa: E402


@pytest.fixture()
def settings_env(tmp_path, monkeypatch):
    """Points settings at a temporary data file and clears the settings cache."""
    data_file = tmp_path / "books.json"
    monkeypatch.setenv("BOOKS_DATA_FILE", str(data_file))
    monkeypatch.delenv("COLLECTION_PREFIX", raising=False)
    core_config.get_settings.cache_clear()
    yield data_file
    core_config.get_settings.cache_clear()


@pytest.fixture()
def data_file(settings_env):
    return settings_env


@pytest.fixture()
def file_store(data_file):
    return JsonFileStore(data_file)


@pytest.fixture()
def client(settings_env):
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def memory_store():
    return MemoryStore()


class ExplodingStore:
    """Store that fails every call; asserts validation happens before storage."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.calls = 0

    def load(self):
        self.calls += 1
        raise AssertionError("storage must not be touched")

    def save(self, books):
        self.calls += 1
        raise AssertionError("storage must not be touched")


@pytest.fixture()
def exploding_store():
    return ExplodingStore()
