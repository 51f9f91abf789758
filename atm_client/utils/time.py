"""
Wall-clock time utilities for history timestamps.
"""

from datetime import datetime
from typing import Callable, Optional

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Current wall-clock time in the local timezone."""
    return datetime.now().astimezone()


def format_history_timestamp(ts: datetime, fmt: str) -> str:
    """
    Format a timestamp for a history entry.

    Args:
        ts: Timestamp to format
        fmt: strftime format string

    Returns:
        Formatted timestamp string
    """
    return ts.strftime(fmt)


def history_timestamp(fmt: str, clock: Optional[Clock] = None) -> str:
    """
    Render the current time for a history entry.

    Args:
        fmt: strftime format string
        clock: Optional clock, defaults to local wall-clock time

    Returns:
        Formatted timestamp string
    """
    return format_history_timestamp((clock or local_now)(), fmt)
