"""Logging helpers."""

from __future__ import annotations

import logging

from assertroute.config import DEFAULT_SETTINGS


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(DEFAULT_SETTINGS.log_level.upper())
    return logger
