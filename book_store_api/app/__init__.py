"""
Application package initializer.

The service is split into a small number of layers: ``core`` holds
configuration, logging, the in‑memory store and domain errors;
``schemas`` defines request and response payloads; ``services``
contains validation and business logic; ``api`` exposes versioned
routers.  Handlers never touch the store directly, they go through
``BookService``.
"""

from .main import app  # noqa: F401
