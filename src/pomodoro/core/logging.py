"""Logging setup.

Provides consistent logging across the codebase. Records are rendered by Rich
on stderr so standard output only ever carries the result line.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "pomodoro"

_DEFAULT_FORMAT = "%(name)s: %(message)s"


def setup_logging(level: str = "WARNING", format_string: str | None = None) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR).
        format_string: Custom format string (uses default if None).

    Returns:
        The configured `pomodoro` logger.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger for a module (typically `__name__`)."""

    return logging.getLogger(name)
