"""
Pydantic models for book data.

``BookCandidate`` is the request body for create and update calls.
Every field is optional and accepts any JSON value: type and range
checks belong to ``services.validation`` so that all violations are
collected into one response.  Presence of a field is tracked by
pydantic (``model_fields_set``), which lets partial updates tell an
omitted field apart from an explicit ``null``.

``BookRead`` is the stored and returned representation; the remaining
models are the response envelopes.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class BookCandidate(BaseModel):
    """Schema for book fields supplied by a client."""

    title: Any = Field(None, examples=["The Left Hand of Darkness"])
    author: Any = Field(None, examples=["Ursula K. Le Guin"])
    year: Any = Field(None, examples=[1969])
    genre: Any = Field(None, examples=["Science Fiction"])

    model_config = {"extra": "ignore"}

    def supplied_fields(self) -> Dict[str, Any]:
        """Return only the fields present in the request body."""
        return self.model_dump(exclude_unset=True)


class BookRead(BaseModel):
    """Schema for reading a book from the API."""

    id: int
    title: str
    author: str
    year: Optional[int] = None
    genre: Optional[str] = None


class BookListResponse(BaseModel):
    success: bool = True
    count: int
    data: List[BookRead]


class BookResponse(BaseModel):
    success: bool = True
    data: BookRead


class BookMessageResponse(BaseModel):
    """Envelope for mutating calls: carries a human readable message."""

    success: bool = True
    message: str
    data: BookRead


class ErrorResponse(BaseModel):
    """Failure envelope.

    ``errors`` is only present for validation failures.
    """

    success: bool = False
    message: str
    errors: Optional[List[str]] = None
