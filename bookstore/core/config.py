"""
Configuration helpers for the bookstore backend.

Exposes a frozen Settings object that reads environment variables (data file
location, route prefix, logging, server address) so that routers/services do
not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_file: Path
    collection_prefix: str
    log_level: str
    log_file: str | None
    host: str
    port: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _path(value: str | None, default: Path) -> Path:
        if not value:
            return default
        path = Path(value)
        return path if path.is_absolute() else PROJECT_ROOT / path

    prefix = (os.getenv("COLLECTION_PREFIX") or "").strip().strip("/") or "api/books"
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_file=_path(os.getenv("BOOKS_DATA_FILE"), PROJECT_ROOT / "data" / "books.json"),
        collection_prefix="/" + prefix,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE") or None,
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "3000"), 3000),
    )
