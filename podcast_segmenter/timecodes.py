"""Timestamp parsing and formatting helpers"""

import re
from datetime import datetime
from typing import Iterable, Optional, Union

Seconds = Union[int, float]

# H:MM:SS (1-2 digit hour) or MM:SS, minutes and seconds in 0-59
VALID_TIMESTAMP = re.compile(
    r"(\d{1,2}):([0-5]?\d):([0-5]?\d)|([0-5]?\d):([0-5]?\d)", re.ASCII
)

RELATIVE_INTERVALS = [
    ("year", 31536000),
    ("month", 2592000),
    ("week", 604800),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
]


def _split_seconds(seconds: Seconds):
    total = int(seconds // 1)
    return total // 3600, (total % 3600) // 60, total % 60


def format_time(seconds: Seconds) -> str:
    """Format seconds as MM:SS, or HH:MM:SS once an hour is reached"""
    hours, minutes, secs = _split_seconds(seconds)
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def parse_time(time_str: str) -> int:
    """Parse a MM:SS or HH:MM:SS string to seconds

    Returns 0 for anything that is not two or three numeric fields, so
    callers that need to tell "00:00" from garbage should check
    is_valid_timestamp() first.
    """
    parts = time_str.split(":")
    try:
        values = [int(part) for part in parts]
    except ValueError:
        return 0

    if len(values) == 2:
        return values[0] * 60 + values[1]
    elif len(values) == 3:
        return values[0] * 3600 + values[1] * 60 + values[2]

    return 0


def format_duration(seconds: Seconds) -> str:
    """Format a duration for display (e.g. 1h 23m, 45m, 2m 30s)"""
    hours, minutes, secs = _split_seconds(seconds)

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 and hours == 0:
        parts.append(f"{secs}s")

    return " ".join(parts) or "0s"


def format_srt_time(seconds: Seconds) -> str:
    """Format seconds as SRT timestamp: HH:MM:SS,mmm."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    millis = int((seconds % 1) * 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


def is_valid_timestamp(timestamp: str) -> bool:
    """Check whether a string is a well-formed H:MM:SS or MM:SS timestamp"""
    return VALID_TIMESTAMP.fullmatch(timestamp) is not None


def calculate_total_duration(timestamps: Iterable[str]) -> int:
    """Return the latest time, in seconds, among a set of timestamps"""
    return max((parse_time(timestamp) for timestamp in timestamps), default=0)


def get_relative_time(moment: datetime, now: Optional[datetime] = None) -> str:
    """Describe how long ago a moment was, e.g. "2 hours ago"

    Args:
        moment: The past datetime to describe
        now: Reference time (defaults to the current time, in moment's timezone)

    Returns:
        Relative time phrase, or "Just now" for anything under a minute
    """
    if now is None:
        now = datetime.now(moment.tzinfo)

    diff_seconds = int((now - moment).total_seconds())

    for unit, unit_seconds in RELATIVE_INTERVALS:
        interval = diff_seconds // unit_seconds
        if interval >= 1:
            return f"{interval} {unit}{'s' if interval > 1 else ''} ago"

    return "Just now"
