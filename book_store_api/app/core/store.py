"""
In‑memory storage for books.

``BookStore`` owns the authoritative, insertion‑ordered collection of
books and the id counter.  Nothing is persisted: a new store starts
from the seed data every time the process starts.  The store is
created by ``main.create_app`` and handed to the service layer; it is
never module‑level state.

All operations acquire a re‑entrant lock.  Callers that need a
read‑validate‑write sequence to be atomic (the service layer) hold
``store.lock`` for the whole sequence.
"""

import re
import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .errors import BookNotFoundError
from ..schemas.book import BookRead


SEED_BOOKS: List[Dict[str, Any]] = [
    {"title": "To Kill a Mockingbird", "author": "Harper Lee", "year": 1960, "genre": "Fiction"},
    {"title": "1984", "author": "George Orwell", "year": 1949, "genre": "Dystopian Fiction"},
    {"title": "Pride and Prejudice", "author": "Jane Austen", "year": 1813, "genre": "Romance"},
]

MUTABLE_FIELDS = ("title", "author", "year", "genre")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_book_id(raw: Any) -> Optional[int]:
    """Parse a path id leniently.

    Leading digits are used (``"12abc"`` gives 12); anything without a
    leading integer returns ``None``, which callers treat as "no such
    book" rather than a separate error.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return None
    return int(match.group(1))


class BookStore:
    """Ordered collection of books plus a monotonically increasing id counter."""

    def __init__(self, books: Iterable[Mapping[str, Any]] = ()) -> None:
        self.lock = threading.RLock()
        self._books: List[BookRead] = []
        self._next_id = 1
        for fields in books:
            self.create(fields)

    @classmethod
    def with_seed_data(cls) -> "BookStore":
        """Return a store holding the three seed books (ids 1–3)."""
        return cls(SEED_BOOKS)

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        with self.lock:
            return len(self._books)

    def _index_of(self, book_id: int) -> int:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        raise BookNotFoundError(book_id)

    def list(self) -> List[BookRead]:
        with self.lock:
            return [book.model_copy() for book in self._books]

    def get(self, book_id: int) -> BookRead:
        with self.lock:
            return self._books[self._index_of(book_id)].model_copy()

    def create(self, fields: Mapping[str, Any]) -> BookRead:
        """Append a new book and return it.

        ``fields`` must already be validated and normalized.  The id is
        taken from the counter, which is then incremented; ids are never
        reused, even after deletion.
        """
        with self.lock:
            book = BookRead(id=self._next_id, **{key: fields.get(key) for key in MUTABLE_FIELDS})
            self._next_id += 1
            self._books.append(book)
            return book.model_copy()

    def replace(self, book_id: int, fields: Mapping[str, Any]) -> BookRead:
        """Overwrite every mutable field; missing keys become ``None``."""
        with self.lock:
            book = self._books[self._index_of(book_id)]
            for key in MUTABLE_FIELDS:
                setattr(book, key, fields.get(key))
            return book.model_copy()

    def patch(self, book_id: int, partial_fields: Mapping[str, Any]) -> BookRead:
        """Overwrite only the mutable fields present in ``partial_fields``."""
        with self.lock:
            book = self._books[self._index_of(book_id)]
            for key in MUTABLE_FIELDS:
                if key in partial_fields:
                    setattr(book, key, partial_fields[key])
            return book.model_copy()

    def delete(self, book_id: int) -> BookRead:
        with self.lock:
            return self._books.pop(self._index_of(book_id))
