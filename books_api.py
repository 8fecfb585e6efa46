"""Books API client.

A thin wrapper around the Books REST API using ``requests``.  Every
method returns a ``(data, error)`` tuple: on success ``data`` holds the
``data`` member of the response envelope and ``error`` is ``None``; on
failure ``data`` is ``None`` and ``error`` is a dictionary with
``status_code``, ``message`` and, for validation failures, ``errors``.

The client never raises for HTTP or transport errors, which keeps
callers such as scripts and bots free of ``try`` blocks::

    api = BooksAPI(base_url="http://localhost:3000")
    book, error = api.create_book(title="Dune", author="Frank Herbert", year=1965)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class BooksAPI:
    """Client for the Books API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[Any] = None,
        timeout: Optional[float] = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional session object.  Anything with a
                ``requests``-style ``request`` method works; a new
                ``requests.Session`` is created when omitted.
            timeout: Per-request timeout in seconds, or ``None`` to send
                requests without one.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request and unwrap the response envelope."""
        url = f"{self.base_url}{path}"
        kwargs: Dict[str, Any] = {}
        if json_body is not None:
            kwargs["json"] = json_body
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code >= 400:
            error: Dict[str, Any] = {"status_code": response.status_code, "message": response.text}
            if isinstance(payload, dict):
                error["message"] = payload.get("message") or str(payload)
                if payload.get("errors"):
                    error["errors"] = payload["errors"]
            logger.error("API request failed (%s): %s", response.status_code, error["message"])
            return None, error

        if not isinstance(payload, dict):
            return None, {"status_code": response.status_code, "message": "Malformed response body"}
        return payload.get("data"), None

    # ------------------------------------------------------------------
    # Book operations
    # ------------------------------------------------------------------
    def list_books(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all books.

        Returns:
            A tuple ``(books, error)``.  ``books`` is an empty list on
            failure.
        """
        data, error = self._request("GET", "/books")
        return data or [], error

    def get_book(self, book_id: int) -> Result:
        return self._request("GET", f"/books/{book_id}")

    def create_book(self, *, title: str, author: str, year: Any = None, genre: Any = None) -> Result:
        body: Dict[str, Any] = {"title": title, "author": author}
        if year is not None:
            body["year"] = year
        if genre is not None:
            body["genre"] = genre
        return self._request("POST", "/books", json_body=body)

    def replace_book(
        self, book_id: int, *, title: str, author: str, year: Any = None, genre: Any = None
    ) -> Result:
        """Replace every field of a book; omitted optionals are cleared."""
        body = {"title": title, "author": author, "year": year, "genre": genre}
        return self._request("PUT", f"/books/{book_id}", json_body=body)

    def update_book(self, book_id: int, **fields: Any) -> Result:
        """Partially update a book with the given keyword fields."""
        return self._request("PATCH", f"/books/{book_id}", json_body=fields)

    def delete_book(self, book_id: int) -> Result:
        return self._request("DELETE", f"/books/{book_id}")
