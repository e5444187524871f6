"""Utility functions for working with dates and times."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "get_current_timestamp",
    "to_storage_precision",
    "parse_timestamp",
]


def to_storage_precision(value: datetime) -> datetime:
    """Return *value* as an aware UTC datetime truncated to milliseconds.

    BSON dates only keep millisecond precision, so values are truncated
    before they are written. A report built in memory then compares equal
    to the same report read back from MongoDB.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def get_current_timestamp() -> datetime:
    """Return the current UTC datetime at storage (millisecond) precision.

    This object can be stored directly in MongoDB where it will be written as
    a BSON Date.
    """
    return to_storage_precision(datetime.now(tz=timezone.utc))


def parse_timestamp(value: Any) -> datetime | None:
    """Best-effort conversion of an ISO-8601 string or datetime.

    Calendar providers send either a full ``dateTime`` or an all-day
    ``date``; a trailing ``Z`` is accepted. Anything unparsable yields
    ``None``.
    """
    if isinstance(value, datetime):
        return to_storage_precision(value)
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return to_storage_precision(datetime.fromisoformat(text))
    except ValueError:
        return None
