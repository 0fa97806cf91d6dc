"""
Timestamp helpers for @done / @cancelled tags.
"""

from datetime import datetime
from typing import Optional

# e.g. "26-10-17 14:30"
DEFAULT_TIMESTAMP_FORMAT = "%y-%m-%d %H:%M"


def timestamp(now: Optional[datetime] = None, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    """
    Format a completion timestamp.

    Args:
        now: Moment to format (default: current local time)
        fmt: strftime format

    Returns:
        Formatted timestamp string
    """
    return (now or datetime.now()).strftime(fmt)
