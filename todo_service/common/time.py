"""
Time Utilities

Backend policy:
- Store timestamps in DynamoDB as integer epoch milliseconds.
- Use UTC-aware datetimes truncated to milliseconds at the domain/API boundary.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

UTC = timezone.utc


def utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure a datetime is UTC-aware.

    - If `dt` is naive, treat it as UTC.
    - If `dt` is timezone-aware, convert it to UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def truncate_to_millis(dt: datetime) -> datetime:
    """Drop sub-millisecond precision and normalize to UTC."""
    aware = ensure_utc(dt)
    return aware.replace(microsecond=aware.microsecond - aware.microsecond % 1000)


def utc_now_ms() -> datetime:
    """Return current UTC time with millisecond precision."""
    return truncate_to_millis(utc_now())


def to_epoch_millis(dt: datetime) -> int:
    """Convert a datetime to integer milliseconds since the Unix epoch."""
    aware = ensure_utc(dt)
    delta = aware - datetime(1970, 1, 1, tzinfo=UTC)
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def from_epoch_millis(millis: int) -> datetime:
    """Convert milliseconds since the Unix epoch to a UTC-aware datetime."""
    seconds, remainder = divmod(int(millis), 1000)
    return datetime.fromtimestamp(seconds, UTC).replace(microsecond=remainder * 1000)
