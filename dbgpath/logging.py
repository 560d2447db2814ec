"""Logging setup for dbgpath.

Every package logger is a child of the ``dbgpath`` logger, which owns the
single handler. Records go to stderr, so commands that print JSON keep
stdout machine-readable.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "dbgpath"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler to the ``dbgpath`` logger.

    Only the first call has an effect; use ``reset_logging`` to start over.

    Args:
        level: Initial level for the package logger.
        format_string: Record format (default: ``DEFAULT_FORMAT``).
        handler: Handler to install (default: a stderr StreamHandler).
    """
    global _configured
    if _configured:
        return

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers[:] = [handler]
    root.setLevel(level)
    # pytest's caplog listens on the root logger
    root.propagate = True
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (typically ``__name__``)."""
    setup_root_logger()
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handler."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the package handler and level (mainly for testing)."""
    global _configured
    _configured = False
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
