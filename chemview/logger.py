"""Logging utilities for the mixing tank console."""

from __future__ import annotations

import logging
import os
from typing import Optional

_LOGGERS: dict[str, logging.Logger] = {}


def get_logger(name: str = "chemview") -> logging.Logger:
    """Return a named logger configured for console and Streamlit usage.

    The level comes from the LOG_LEVEL environment variable (default INFO).
    """
    if name in _LOGGERS:
        return _LOGGERS[name]

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    logger.propagate = False

    _LOGGERS[name] = logger
    return logger


def reset_logger(name: str) -> None:
    """Drop a cached logger and its handlers so the next get_logger rebuilds it."""
    existing: Optional[logging.Logger] = _LOGGERS.pop(name, None)
    if existing:
        for handler in list(existing.handlers):
            existing.removeHandler(handler)
            handler.close()
