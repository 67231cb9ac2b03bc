"""Common helpers shared across models."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def rfc3339(dt: datetime) -> str:
    """Format an aware datetime as RFC 3339 with seconds precision."""
    return dt.isoformat(timespec="seconds")
