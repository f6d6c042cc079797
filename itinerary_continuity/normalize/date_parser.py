"""Datetime parsing for upstream segment drafts."""

from datetime import date, datetime
from typing import Optional, Union

from dateutil import parser as dateutil_parser

_BLANK = ("null", "none", "not specified", "unknown", "")


def _local_wall_time(dt: datetime) -> datetime:
    """Drop any UTC offset, keeping the wall-clock reading.

    Segment times are local to where each segment happens, and naive and
    aware values cannot be compared, so every parsed value is naive.
    """
    return dt.replace(tzinfo=None) if dt.tzinfo is not None else dt


def parse_datetime(raw: Union[str, datetime, date, None]) -> Optional[datetime]:
    """Parse a datetime in many formats, returning a naive datetime or None.

    Handles:
      - datetime / date objects (dates become midnight)
      - ISO-8601 (2024-03-26T16:30:00, with or without offset or a trailing Z)
      - free-form strings dateutil understands ("26 March 2024 4:30pm")

    Offsets are dropped: "2024-03-26T16:30:00+02:00" reads as 16:30.
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return _local_wall_time(raw)
    if isinstance(raw, date):
        return datetime(raw.year, raw.month, raw.day)
    if not isinstance(raw, str) or raw.strip().lower() in _BLANK:
        return None

    raw = raw.strip()

    # 1. ISO-8601, the common case for machine-produced drafts
    try:
        return _local_wall_time(datetime.fromisoformat(raw.replace("Z", "+00:00")))
    except ValueError:
        pass

    # 2. dateutil as general fallback
    try:
        return _local_wall_time(dateutil_parser.parse(raw))
    except (ValueError, OverflowError):
        pass

    return None
