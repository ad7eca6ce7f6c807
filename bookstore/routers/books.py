from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Body, Request, status
from fastapi.responses import JSONResponse

from bookstore.schemas.book import BookCreate, BookRead, ErrorResponse, MessageResponse
from bookstore.services.book_service import (
    BookConflictError,
    BookError,
    BookNotFoundError,
    BookService,
    BookValidationError,
    InvalidIdentifierError,
    StorageFailureError,
)

router = APIRouter(tags=["books"])

ERROR_STATUS = {
    InvalidIdentifierError: status.HTTP_400_BAD_REQUEST,
    BookValidationError: status.HTTP_400_BAD_REQUEST,
    BookConflictError: status.HTTP_409_CONFLICT,
    BookNotFoundError: status.HTTP_404_NOT_FOUND,
    StorageFailureError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def status_for(exc: BookError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in ERROR_STATUS:
            return ERROR_STATUS[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def book_error_response(request: Request, exc: BookError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=status_for(exc))


def _get_book_service(request: Request) -> BookService:
    svc = getattr(getattr(request.app, "state", None), "book_service", None)
    if not svc:
        raise RuntimeError("BookService not configured")
    return svc


@router.get("", responses={200: {"model": List[BookRead]}, 500: _ERRORS[500]})
def list_books(request: Request):
    # stored records go out untouched, no response_model coercion
    return JSONResponse(_get_book_service(request).list_books())


@router.get("/{book_id}", responses={200: {"model": BookRead}, **_ERRORS})
def get_book(book_id: str, request: Request):
    return JSONResponse(_get_book_service(request).get_book(book_id))


@router.post(
    "",
    response_model=BookRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=_ERRORS,
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": BookCreate.model_json_schema()}}}},
)
def create_book(request: Request, payload: Any = Body(None)):
    return _get_book_service(request).create_book(payload)


@router.delete("/{book_id}", response_model=MessageResponse, responses=_ERRORS)
def delete_book(book_id: str, request: Request):
    message = _get_book_service(request).delete_book(book_id)
    return {"message": message}
