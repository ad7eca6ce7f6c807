"""
Serve the bookstore API with uvicorn.

Usage:
    python -m bookstore

Host, port and the data file are read from HOST, PORT and BOOKS_DATA_FILE.
"""
import logging

import uvicorn

from bookstore.app import create_app
from bookstore.core.config import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    logging.getLogger("bookstore").info(
        "Server running at http://%s:%s%s", settings.host, settings.port, settings.collection_prefix
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
