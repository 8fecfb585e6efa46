"""
Logging configuration for the Books API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the ``book_store_api`` package logger, so the service's own
records share one format regardless of how the ASGI server configures
the root logger.  Uvicorn's error logger is set to the same level; its
access log is left alone.

Calling ``setup_logging`` again (one call per ``create_app``) only
adjusts the level.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "book_store_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure and return the package logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file that receives the same records as the console.
        Only honoured on the first call.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)
    logging.getLogger("uvicorn.error").setLevel(numeric_level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Records are handled here; do not repeat them through root handlers.
    logger.propagate = False
    return logger
