"""Process-wide logging setup."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGER_INITIALIZED = False


def configure_logging(level: str | None = None) -> None:
    """Install the stderr handler once; later calls only change the level."""

    global _LOGGER_INITIALIZED
    resolved_level = (level or "WARNING").upper()

    if _LOGGER_INITIALIZED:
        logging.getLogger().setLevel(resolved_level)
        return

    logging.basicConfig(level=resolved_level, format=LOG_FORMAT, stream=sys.stderr)
    _LOGGER_INITIALIZED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for the requested module."""
    return logging.getLogger(name)
