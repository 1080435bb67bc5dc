"""Field-level parsing for timelog CSV values.

Dates are `YYYY-MM-DD` and clock times are zero-padded `HH:MM`. The helpers
return None for anything they do not understand so the caller can collect a
problem per line instead of stopping at the first one.
"""

from __future__ import annotations

import re
from datetime import date as _date, datetime, time as _time

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def parse_iso_date(s: str | None) -> _date | None:
    """Parse a strict `YYYY-MM-DD` date, or return None."""
    if not s or not _is_iso_date(s):
        return None
    try:
        return datetime.strptime(s, DATE_FORMAT).date()
    except ValueError:
        return None


def parse_clock_time(s: str | None) -> _time | None:
    """Parse a strict `HH:MM` wall-clock time, or return None.

    Hours run 00-23 and minutes 00-59; "8:30" and "08:30:00" are rejected.
    """
    if not s or not re.fullmatch(r"\d{2}:\d{2}", s):
        return None
    try:
        return datetime.strptime(s, TIME_FORMAT).time()
    except ValueError:
        return None


def parse_timestamp(s: str | None) -> datetime | None:
    """Parse `YYYY-MM-DDTHH:MM` (a space separator is accepted too)."""
    value = (s or "").strip()
    m = re.fullmatch(r"(\d{4}-\d{2}-\d{2})[T ](\d{2}:\d{2})", value)
    if not m:
        return None
    day = parse_iso_date(m.group(1))
    at = parse_clock_time(m.group(2))
    if day is None or at is None:
        return None
    return datetime.combine(day, at)


def format_clock_time(value: _time | None) -> str:
    """Render a slot value; unset slots become the empty string."""
    if value is None:
        return ""
    return value.strftime(TIME_FORMAT)


def _is_iso_date(s: str) -> bool:
    return bool(re.fullmatch(r"\d{4}-\d{2}-\d{2}", s))
