"""
Core utility functions for the watcher.
"""
from datetime import datetime, timezone

# Standard timezone constants
UTC = timezone.utc


def get_utc_now() -> datetime:
    """
    Get current datetime in UTC.

    Use this for persisted state and Discord timestamps.

    Returns:
        Current datetime with UTC timezone
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
