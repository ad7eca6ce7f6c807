from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookstore.core.config import Settings, get_settings
from bookstore.core.logging_config import setup_logging
from bookstore.repositories.json_storage import BookStore, JsonFileStore
from bookstore.routers import books as books_router
from bookstore.services.book_service import BookError, BookService

logger = logging.getLogger(__name__)


async def _book_error_handler(request: Request, exc: BookError) -> JSONResponse:
    return books_router.book_error_response(request, exc)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected malformed request on %s: %s", request.url.path, exc.errors())
    return JSONResponse({"error": "Invalid request body"}, status_code=400)


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


def create_app(settings: Settings | None = None, store: BookStore | None = None) -> FastAPI:
    """Build the API; ``store`` defaults to the JSON file named in settings."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(title="Bookstore API")
    app.state.settings = settings
    if store is None:
        store = JsonFileStore(settings.data_file)
        logger.debug("Using book data file %s", settings.data_file)
    app.state.book_service = BookService(store)

    app.include_router(books_router.router, prefix=settings.collection_prefix)
    app.add_exception_handler(BookError, _book_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
    return app


app = create_app()
