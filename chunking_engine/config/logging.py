"""Structured logging setup. Read-only config; no business logic."""

import logging
import sys
from typing import Any

from chunking_engine.config.settings import get_settings


def configure_logging(level_name: str | None = None) -> None:
    """Configure structured logging for the application. `level_name` overrides settings."""
    settings = get_settings()
    name = level_name or ("DEBUG" if settings.debug else settings.log_level)
    level = getattr(logging, name.upper(), logging.INFO)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt = "%Y-%m-%dT%H:%M:%S"

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # tiktoken fetches its BPE files over HTTP on first use
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)


def log_extra(extra: dict[str, Any]) -> dict[str, Any]:
    """Build a dict suitable for logger.info(..., **log_extra(...)) for structured fields."""
    return {"extra": extra}
