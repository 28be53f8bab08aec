"""
Centralized datetime utilities for consistent timestamp handling across the application
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC datetime

    Returns:
        Current datetime in UTC timezone
    """
    return datetime.now(timezone.utc)


def timestamp_ms() -> int:
    """
    Get current Unix timestamp in milliseconds

    Returns:
        Current time as milliseconds since epoch
    """
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def from_timestamp_ms(value: int) -> datetime:
    """
    Convert a Unix timestamp in milliseconds to a UTC datetime

    Args:
        value: Milliseconds since epoch

    Returns:
        Timezone-aware UTC datetime
    """
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def format_duration_ms(start_time: datetime, end_time: Optional[datetime] = None) -> float:
    """
    Calculate duration in milliseconds between two datetimes

    Args:
        start_time: Start datetime
        end_time: End datetime (defaults to now if not provided)

    Returns:
        Duration in milliseconds
    """
    if end_time is None:
        end_time = utc_now()
    return (end_time - start_time).total_seconds() * 1000
