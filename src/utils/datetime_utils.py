"""Helpers for UTC-normalized timestamps."""

from datetime import date, datetime, time, timezone


def ensure_utc(value: datetime | date) -> datetime:
    """Normalize a date or datetime to an aware UTC datetime.

    Naive datetimes are interpreted as UTC. Plain dates map to midnight UTC.

    Args:
        value: Raw date or datetime from user input or storage.

    Returns:
        datetime: Timezone-aware datetime in UTC.
    """
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    """Current UTC time.

    Wrapped so tests can patch it.
    """
    return datetime.now(timezone.utc)


__all__ = ["ensure_utc", "utc_now"]
