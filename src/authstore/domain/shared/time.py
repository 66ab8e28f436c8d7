"""Time utilities shared by the persistence and contract layers."""

from datetime import datetime, timezone


def ensure_tz_aware(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (UTC if naive)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def to_storage_timestamp(dt: datetime | None) -> datetime | None:
    """Normalize a caller-supplied timestamp before it is written.

    Values are stored as UTC so backends that drop the offset (SQLite)
    still round-trip the same instant.
    """
    if dt is None:
        return None
    return ensure_tz_aware(dt).astimezone(timezone.utc)


def from_storage_timestamp(dt: datetime | None) -> datetime | None:
    """Normalize a stored timestamp into a UTC-aware datetime."""
    if dt is None:
        return None
    return ensure_tz_aware(dt).astimezone(timezone.utc)
