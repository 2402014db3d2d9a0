"""Timestamp conversion for service payloads."""

from datetime import datetime, timezone


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp from a payload.

    A trailing ``Z`` is accepted. Naive values are treated as UTC so the
    result always carries a fixed offset.

    Args:
        value: ISO 8601 string.

    Returns:
        timezone-aware datetime, keeping the offset it was sent with.

    Raises:
        ValueError: The string is not ISO 8601.
    """
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def format_timestamp(dt: datetime) -> str:
    """Format a datetime as ISO 8601 with its offset.

    Args:
        dt: datetime to format. Naive values are treated as UTC.

    Returns:
        ISO 8601 string like "2024-01-01T12:00:00+00:00"
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()
