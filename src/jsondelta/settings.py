"""Application-wide settings and environment loading."""

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"

load_dotenv()
logger.debug("Environment variables loaded from .env if present")


@lru_cache(maxsize=1)
def get_log_level() -> str:
    """Return the log level name from the environment."""
    level = os.getenv("JSONDELTA_LOG_LEVEL") or os.getenv("LOG_LEVEL")
    if level:
        return level.strip().upper()
    return DEFAULT_LOG_LEVEL
