"""RFC3339 timestamp helpers.

Timestamps are stored as fixed-width UTC strings so that string comparison in
SQL orders them chronologically.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM:SS.ffffff+00:00``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")
