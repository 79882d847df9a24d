"""Utilities for datetime handling."""

from datetime import UTC, datetime, timedelta

# Smallest step datetime can represent
TICK = timedelta(microseconds=1)


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def later_than(previous: datetime, now: datetime) -> datetime:
    """Return now, or one tick past previous if the clock has not advanced."""
    if now > previous:
        return now
    return previous + TICK
