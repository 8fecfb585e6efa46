"""
Domain errors raised by the service layer.

Handlers do not build error responses themselves; exception handlers
registered in ``main.create_app`` translate these exceptions into the
``{"success": false, ...}`` envelope.
"""

from typing import Any, List


class BookStoreError(Exception):
    """Base class for all book store errors."""


class BookNotFoundError(BookStoreError):
    """No book exists with the requested id."""

    def __init__(self, book_id: Any) -> None:
        super().__init__("Book not found")
        self.book_id = book_id


class BookValidationError(BookStoreError):
    """Candidate fields violated one or more validation rules.

    ``errors`` holds every violated rule, not just the first one.
    """

    def __init__(self, errors: List[str]) -> None:
        super().__init__("Validation errors")
        self.errors = list(errors)
