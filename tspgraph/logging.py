"""Centralized logging configuration for tspgraph.

Log records go to standard error so that standard output carries only tour
listings and JSON documents.
"""

import logging
import sys
from typing import IO, Optional

ROOT_LOGGER_NAME = "tspgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Set once the package logger has its handler
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Attach a single handler to the 'tspgraph' logger.

    Repeated calls are ignored until `reset_logging` is called.

    Args:
        level: Logging level (default: INFO).
        format_string: Record format; `DEFAULT_FORMAT` when omitted.
        handler: Custom handler. Takes precedence over `stream`.
        stream: Stream for the default StreamHandler (default: sys.stderr).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    if handler is None:
        handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    # Propagate so pytest's caplog sees our records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger below 'tspgraph', configuring the package logger first."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)  # Inherit from parent
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and of its handlers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.WARNING).
    """
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Log search progress and parser details (``--verbose``)."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to the INFO default."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler so the next setup starts fresh (tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
