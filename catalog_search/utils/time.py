"""
Time utilities for cache timestamps.

Cache entries record their creation time as integer epoch milliseconds,
stored as decimal strings next to the payload.
"""

from datetime import datetime, timezone
from typing import Optional


def now_ms() -> int:
    """Current wall-clock time as UTC epoch milliseconds."""
    return to_epoch_ms(datetime.now(timezone.utc))


def to_epoch_ms(ts: datetime) -> int:
    """
    Convert a datetime to epoch milliseconds.

    Naive datetimes are treated as UTC.
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return int(ts.timestamp() * 1000)


def from_epoch_ms(value: int) -> datetime:
    """Convert epoch milliseconds to a UTC datetime."""
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def format_epoch_ms(value: int) -> str:
    """Encode epoch milliseconds the way they are persisted."""
    return str(int(value))


def parse_epoch_ms(raw: Optional[str]) -> Optional[int]:
    """
    Parse a persisted decimal epoch-ms string.

    Returns:
        The integer timestamp, or None if the value is absent or not a
        decimal integer
    """
    if raw is None:
        return None

    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        return None

    return int(text)


def format_epoch_ms_iso(value: int) -> str:
    """Format epoch milliseconds as ISO8601 for logging."""
    return from_epoch_ms(value).isoformat()
