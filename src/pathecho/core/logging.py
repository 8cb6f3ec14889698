"""Logging utilities for pathecho."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(level: str | int, *, debug: bool = False) -> str | int:
    """Debug mode always wins over the configured level."""
    if debug:
        return "DEBUG"
    return level.upper() if isinstance(level, str) else level


def setup_logging(level: str | int = "INFO", *, debug: bool = False) -> None:
    root = logging.getLogger()
    if root.handlers:
        return  # already configured (uvicorn, pytest)
    logging.basicConfig(level=resolve_level(level, debug=debug), format=LOG_FORMAT)


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name or "pathecho")
