"""Logging helpers for Instafilter."""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER: Optional[logging.Logger] = None

LOGGER_NAME = "instafilter"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger() -> logging.Logger:
    """Return the package-level logger configured for Instafilter."""

    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger(LOGGER_NAME)
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(logging.INFO)
    return _LOGGER


def set_log_level(level: Union[int, str]) -> int:
    """Apply *level* to the package logger and return the numeric value used.

    Unknown level names fall back to ``INFO`` so a typo in the settings file
    never silences the application entirely.
    """

    if isinstance(level, str):
        numeric = logging.getLevelName(level.strip().upper())
        if not isinstance(numeric, int):
            numeric = logging.INFO
    else:
        numeric = int(level)
    get_logger().setLevel(numeric)
    return numeric
