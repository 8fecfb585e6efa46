"""
Service layer for books.

``BookService`` wraps a ``BookStore`` and implements the six
operations exposed over HTTP.  Every mutating operation checks that
the book exists, validates the candidate fields, and only then writes
to the store.  A failed validation leaves the store untouched and does
not consume an id.

The whole check‑validate‑write sequence runs while holding the store
lock, so each call is atomic with respect to other requests.
"""

from __future__ import annotations

import logging
from typing import Any, List

from ..core.errors import BookNotFoundError, BookValidationError
from ..core.store import BookStore, parse_book_id
from ..schemas.book import BookCandidate, BookRead
from .validation import normalize_book, validate_book

logger = logging.getLogger(__name__)


class BookService:
    """Service class for managing books."""

    def __init__(self, store: BookStore) -> None:
        self.store = store

    @staticmethod
    def _resolve_id(raw_id: Any) -> int:
        book_id = parse_book_id(raw_id)
        if book_id is None:
            raise BookNotFoundError(raw_id)
        return book_id

    @staticmethod
    def _check(fields: dict) -> None:
        errors = validate_book(fields)
        if errors:
            logger.info("Rejected book payload: %s", "; ".join(errors))
            raise BookValidationError(errors)

    async def list_books(self) -> List[BookRead]:
        return self.store.list()

    async def get_book(self, raw_id: Any) -> BookRead:
        return self.store.get(self._resolve_id(raw_id))

    async def create_book(self, candidate: BookCandidate) -> BookRead:
        """Validate and insert a new book, returning the stored record."""
        fields = candidate.supplied_fields()
        with self.store.lock:
            self._check(fields)
            book = self.store.create(normalize_book(fields))
        logger.info("Created book %s", book.id)
        return book

    async def replace_book(self, raw_id: Any, candidate: BookCandidate) -> BookRead:
        """Overwrite every mutable field of a book.

        Fields omitted from the request are reset to ``None`` (after
        validation, so title and author can never be omitted).
        """
        book_id = self._resolve_id(raw_id)
        fields = candidate.supplied_fields()
        with self.store.lock:
            self.store.get(book_id)
            self._check(fields)
            book = self.store.replace(book_id, normalize_book(fields))
        logger.info("Replaced book %s", book_id)
        return book

    async def update_book(self, raw_id: Any, candidate: BookCandidate) -> BookRead:
        """Apply a partial update.

        The supplied fields are merged over the current record and the
        merge is validated, so omitted fields keep their current values
        and are not re‑checked against the request.  Only the supplied
        fields are then written, taken from the normalized merge.
        """
        book_id = self._resolve_id(raw_id)
        supplied = candidate.supplied_fields()
        with self.store.lock:
            current = self.store.get(book_id)
            merged = {**current.model_dump(exclude={"id"}), **supplied}
            self._check(merged)
            normalized = normalize_book(merged)
            book = self.store.patch(book_id, {key: normalized[key] for key in supplied})
        logger.info("Updated book %s (%s)", book_id, ", ".join(sorted(supplied)) or "no fields")
        return book

    async def delete_book(self, raw_id: Any) -> BookRead:
        book = self.store.delete(self._resolve_id(raw_id))
        logger.info("Deleted book %s", book.id)
        return book
