"""
Main entrypoint for the Books API.

This module assembles the FastAPI application, sets up logging,
registers the error envelope handlers and includes versioned routers.
``create_app`` builds and configures an app around a ``BookStore``;
the module‑level ``app`` uses a freshly seeded store so it can be
served by any ASGI server.  ``run.py`` serves it with ``server.BooksServer``,
which also prints the endpoint summary once the socket is bound.

Every response, including failures, is a JSON object with a
``success`` flag.  Failures map as follows: validation errors to 400,
unknown book ids and unknown routes to 404, anything unexpected to 500
with a generic message (the exception itself is only logged).
"""

import logging
from typing import Any, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .core.errors import BookNotFoundError, BookValidationError
from .core.logging_config import setup_logging
from .core.store import BookStore
from .api.v1.router import router as v1_router
from .schemas.book import ErrorResponse
from .services.book_service import BookService

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, errors: Optional[List[str]] = None) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _describe_request_error(error: Any) -> str:
    # Integer parts are list indexes or JSON decode offsets, not field names.
    location = ".".join(
        str(part) for part in error.get("loc", ()) if part != "body" and not isinstance(part, int)
    )
    message = error.get("msg", "Invalid request")
    return f"{location}: {message}" if location else message


async def book_validation_handler(request: Request, exc: BookValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation errors", exc.errors)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed bodies (bad JSON, non‑object payloads) as validation errors."""
    errors = [_describe_request_error(error) for error in exc.errors()]
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation errors", errors)


async def book_not_found_handler(request: Request, exc: BookNotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, "Book not found")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Routing failures: no path match (404) or path match with another method (405).
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return error_response(status.HTTP_404_NOT_FOUND, "Route not found")
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error during %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Something went wrong!")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookValidationError, book_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(BookNotFoundError, book_not_found_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


def create_app(store: Optional[BookStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[BookStore]
        Store backing the application.  When omitted a new store with
        the seed books is created.  Each application owns its store for
        its whole lifetime; there is no reload or reset.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    # Initialise logging before anything else so that request handling
    # can log from the first request.
    setup_logging(settings.log_level, settings.log_file)

    # Routes accept an optional trailing slash themselves; no 307 redirects.
    app = FastAPI(title=settings.project_name, version=settings.api_version, redirect_slashes=False)

    app.state.store = store if store is not None else BookStore.with_seed_data()
    app.state.book_service = BookService(app.state.store)

    # Version 1 is served from the root so that clients use /books.
    app.include_router(v1_router)
    register_exception_handlers(app)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
