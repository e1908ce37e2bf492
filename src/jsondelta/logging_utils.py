"""Logging configuration utilities for JSON Delta."""

import logging
from typing import Optional

from .settings import DEFAULT_LOG_LEVEL, get_log_level

_LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure application-wide logging once.

    Records go to stderr; stdout is reserved for the delta.
    """
    if logging.getLogger().handlers:
        return

    log_level = (level or get_log_level()).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = DEFAULT_LOG_LEVEL
    logging.basicConfig(level=log_level, format=_LOG_FORMAT)
