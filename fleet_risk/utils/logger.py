"""Centralised Loguru logger shared by the engine, use cases and scripts."""
from __future__ import annotations

import sys

from loguru import logger

_DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO") -> int:
    """Replace the default sink with a stderr sink at ``level``.

    Returns the handler id so callers such as tests can remove it again.
    """

    logger.remove()
    return logger.add(sys.stderr, level=level.upper(), format=_DEFAULT_FORMAT)


__all__ = ["configure_logging", "logger"]
