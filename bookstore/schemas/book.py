"""
Pydantic schemas for book records.

Records are stored and returned as plain dicts; reads hand them back as
stored, so these models mostly document the HTTP surface and shape the
create response. Request bodies are validated by the service
layer so that every rejection is reported as a 400 with the same error body.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BookRead(BaseModel):
    """Schema for reading a book record."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Server generated UUID")
    title: str = Field(..., description="Book title, 2-100 characters")
    author: str = Field(..., description="Author name, at least 5 characters")
    year: Optional[int] = Field(None, description="Publication year, 1900 up to the current year")


class BookCreate(BaseModel):
    """Documented shape of a create request; ``id`` must not be sent."""

    title: str
    author: str
    year: Optional[int] = None


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
