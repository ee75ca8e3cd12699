"""Timestamps for chunk records. Always UTC."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current UTC datetime, used for created_at."""
    return datetime.now(timezone.utc)
