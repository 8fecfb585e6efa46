"""Entry point for the Books API.

Serves ``book_store_api.app.main:app`` with Uvicorn and prints the
endpoint summary once the server is listening.  Host and port
come from ``HOST`` and ``PORT`` (defaults ``0.0.0.0`` and ``3000``);
see ``book_store_api.app.core.config`` for the full list of settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config

from book_store_api.app.core.config import settings
from book_store_api.app.main import app
from book_store_api.app.server import BooksServer


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = BooksServer(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
    except Exception:
        logging.exception("Books API server stopped unexpectedly")
        raise
