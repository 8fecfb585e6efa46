"""
Book endpoints for API v1.

These routes expose a CRUD API for books.  Path ids are taken as raw
strings and parsed by the service, so a non‑numeric id is reported as
"Book not found" instead of a request validation error.  Request
bodies are optional; a missing body behaves like an empty object and
fails validation with the usual 400 envelope.

Every route also answers with a trailing slash (``/books/``, ``/books/1/``);
the application does not redirect.

Errors raised by the service (not found, validation) are rendered by
the exception handlers registered in ``main.create_app``.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Request, status

from book_store_api.app.schemas.book import (
    BookCandidate,
    BookListResponse,
    BookMessageResponse,
    BookResponse,
    ErrorResponse,
)
from book_store_api.app.services.book_service import BookService

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


def get_book_service(request: Request) -> BookService:
    """Return the service bound to the running application."""
    return request.app.state.book_service


def _candidate(book_in: Optional[BookCandidate]) -> BookCandidate:
    return book_in if book_in is not None else BookCandidate()


@router.get("", response_model=BookListResponse)
@router.get("/", response_model=BookListResponse, include_in_schema=False)
async def list_books(service: BookService = Depends(get_book_service)) -> BookListResponse:
    """Return all books in insertion order."""
    books = await service.list_books()
    return BookListResponse(count=len(books), data=books)


@router.get("/{book_id}", response_model=BookResponse, responses=NOT_FOUND)
@router.get("/{book_id}/", response_model=BookResponse, include_in_schema=False)
async def get_book(book_id: str, service: BookService = Depends(get_book_service)) -> BookResponse:
    """Retrieve a single book by its ID."""
    return BookResponse(data=await service.get_book(book_id))


@router.post(
    "",
    response_model=BookMessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses=INVALID,
)
@router.post("/", response_model=BookMessageResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_book(
    book_in: Optional[BookCandidate] = Body(None),
    service: BookService = Depends(get_book_service),
) -> BookMessageResponse:
    """Create a new book.

    ``title`` and ``author`` are required; ``year`` and ``genre`` are
    optional and stored as ``null`` when omitted.
    """
    book = await service.create_book(_candidate(book_in))
    return BookMessageResponse(message="Book created successfully", data=book)


@router.put("/{book_id}", response_model=BookMessageResponse, responses={**NOT_FOUND, **INVALID})
@router.put("/{book_id}/", response_model=BookMessageResponse, include_in_schema=False)
async def replace_book(
    book_id: str,
    book_in: Optional[BookCandidate] = Body(None),
    service: BookService = Depends(get_book_service),
) -> BookMessageResponse:
    """Update a book completely.

    Every mutable field is overwritten; omitted optional fields are
    reset to ``null``.
    """
    book = await service.replace_book(book_id, _candidate(book_in))
    return BookMessageResponse(message="Book updated successfully", data=book)


@router.patch("/{book_id}", response_model=BookMessageResponse, responses={**NOT_FOUND, **INVALID})
@router.patch("/{book_id}/", response_model=BookMessageResponse, include_in_schema=False)
async def update_book(
    book_id: str,
    book_in: Optional[BookCandidate] = Body(None),
    service: BookService = Depends(get_book_service),
) -> BookMessageResponse:
    """Update a book partially; unspecified fields remain unchanged."""
    book = await service.update_book(book_id, _candidate(book_in))
    return BookMessageResponse(message="Book updated successfully", data=book)


@router.delete("/{book_id}", response_model=BookMessageResponse, responses=NOT_FOUND)
@router.delete("/{book_id}/", response_model=BookMessageResponse, include_in_schema=False)
async def delete_book(book_id: str, service: BookService = Depends(get_book_service)) -> BookMessageResponse:
    """Delete a book and return the removed record."""
    book = await service.delete_book(book_id)
    return BookMessageResponse(message="Book deleted successfully", data=book)
