"""
DateTime utilities
==================

Messages are stored and compared as timezone-aware UTC datetimes.

Functions:
- utc_now(): current UTC time
- ensure_utc(): normalize naive or offset datetimes to UTC
- to_bson_precision(): drop sub-millisecond digits BSON dates cannot hold
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


def to_bson_precision(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Truncate a datetime to whole milliseconds, the resolution of a BSON Date.

    Values written this way read back from MongoDB unchanged.
    """
    if dt is None:
        return None
    return dt.replace(microsecond=dt.microsecond // 1000 * 1000)
