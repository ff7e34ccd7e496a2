"""Logging helpers for the command line tool."""

import logging
import os
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _level_from_name(name: Optional[str]) -> Optional[int]:
    if not name:
        return None
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else None


def _default_level() -> int:
    level = _level_from_name(os.getenv("LOG_LEVEL"))
    return logging.INFO if level is None else level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a module logger with a sane default configuration."""
    logger = logging.getLogger(name if name else "cdl_fixer")
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_default_level(), format=LOG_FORMAT)
    return logger


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Send log records to stderr.

    Args:
        level: optional level name override (e.g. "DEBUG"); unknown names fall
            back to the ``LOG_LEVEL`` environment variable, then INFO.
    """
    log_level = _level_from_name(level)
    if log_level is None:
        log_level = _default_level()
    logging.basicConfig(level=log_level, format=LOG_FORMAT, force=True)
    return get_logger()
