"""Utilities for datetime handling."""

from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
ONE_MS = timedelta(milliseconds=1)


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def to_epoch_ms(dt: datetime) -> int:
    """Convert a datetime to integer epoch milliseconds.

    Naive datetimes are treated as UTC. Sub-millisecond precision is dropped.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return (dt - EPOCH) // ONE_MS


def from_epoch_ms(value: int) -> datetime:
    """Convert integer epoch milliseconds to an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=value)


def to_millis(duration: timedelta) -> int:
    """Convert a duration to whole milliseconds."""
    return duration // ONE_MS
