"""
Uvicorn server for the Books API.

``BooksServer`` is a ``uvicorn.Server`` that prints the endpoint
summary once its listening sockets are bound.  The address in the
banner is read back from the bound socket, so it reflects what the
server actually listens on (including an OS‑assigned port when
``port=0``), not the configured defaults.
"""

from typing import List, Optional, Tuple

from uvicorn import Server

ENDPOINTS = (
    ("GET", "/books", "Get all books"),
    ("GET", "/books/:id", "Get book by ID"),
    ("POST", "/books", "Create new book"),
    ("PUT", "/books/:id", "Update book completely"),
    ("PATCH", "/books/:id", "Update book partially"),
    ("DELETE", "/books/:id", "Delete book"),
)


def endpoint_summary(host: str, port: int) -> str:
    """Return the human readable startup banner."""
    lines = [f"Books API server is running on http://{host}:{port}", "", "Available endpoints:"]
    lines.extend(f"{method:<6} {path:<10} - {description}" for method, path, description in ENDPOINTS)
    return "\n".join(lines)


class BooksServer(Server):
    """Uvicorn server that announces the bound address and routes."""

    def bound_address(self) -> Tuple[str, int]:
        """Return ``(host, port)`` of the first listening socket.

        Falls back to the configured values when no TCP socket is bound
        (for example when serving on a Unix domain socket).
        """
        for server in getattr(self, "servers", []):
            for sock in server.sockets or []:
                address = sock.getsockname()
                if isinstance(address, tuple) and len(address) >= 2:
                    return address[0], address[1]
        return self.config.host, self.config.port

    async def startup(self, sockets: Optional[List] = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            host, port = self.bound_address()
            print(endpoint_summary(host, port), flush=True)
