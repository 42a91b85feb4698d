"""
utils/logger.py
---------------
Centralized logging configuration for the API process.
All modules should use `get_logger(__name__)` to obtain a logger instance.

The root level comes from LOG_LEVEL. Request access logs from uvicorn
stay at WARNING unless LOG_LEVEL is DEBUG.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_QUIET_LOGGERS = ("uvicorn.access", "httpx")
_initialized = False


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _init_logging() -> None:
    global _initialized
    if _initialized:
        return
    level = _resolve_level(LOG_LEVEL)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)

    quiet_level = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A configured logging.Logger.
    """
    _init_logging()
    return logging.getLogger(name)
