"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling for detection timestamps.

Detection timestamps travel as ISO 8601 strings and are stored in MongoDB as
BSON dates, so everything here works in UTC:

- utc_now(): timezone-aware current UTC datetime
- now_iso(): current instant as ISO 8601 with millisecond precision and "Z"
- parse_iso(): safely parse an ISO 8601 string (or a bare date) to datetime
- to_iso(): convert a datetime to the same ISO 8601 wire format
- ensure_utc(): normalize naive/aware datetimes to aware UTC
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string.

    Output always has millisecond precision and a "Z" suffix
    (e.g. "2024-05-12T15:04:22.000Z"). Naive datetimes are treated as UTC.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None
    dt = ensure_utc(dt)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_iso() -> str:
    """Current instant as an ISO 8601 string in the wire format used by detections."""
    return to_iso(utc_now())


def parse_iso(dt_str: Optional[str]) -> Optional[datetime]:
    """
    Parse ISO 8601 string to datetime object.

    Handles "Z" suffixes, explicit offsets and bare dates ("2024-05-12").
    Naive values are assumed to be UTC.

    Args:
        dt_str: ISO 8601 string (e.g., "2024-05-12T15:04:22Z" or "2024-05-12")

    Returns:
        timezone-aware datetime object, or None if parsing fails
    """
    if not dt_str or not isinstance(dt_str, str):
        return None

    try:
        normalized = dt_str.strip().replace("Z", "+00:00")
        dt = datetime.fromisoformat(normalized)
    except ValueError:
        return None

    return ensure_utc(dt)
