from __future__ import annotations

import os
from datetime import datetime, time

from .forms import DayRecord

DEFAULT_FULL_DAY_MINUTES = 8 * 60


def get_full_day_minutes() -> int:
    """Full-day reference from CLOCKER_FULL_DAY_HOURS (decimal hours), in minutes."""
    raw = os.environ.get("CLOCKER_FULL_DAY_HOURS") or ""
    try:
        minutes = round(float(raw) * 60)
    except (ValueError, OverflowError):
        return DEFAULT_FULL_DAY_MINUTES
    return minutes if minutes > 0 else DEFAULT_FULL_DAY_MINUTES


def span_minutes(start: time | None, end: time | None) -> int | None:
    """Minutes between two clock times on the same day, None if either is unset.

    A span whose end is before its start counts as zero.
    """
    if start is None or end is None:
        return None
    anchor = datetime(2000, 1, 1)
    delta = datetime.combine(anchor, end) - datetime.combine(anchor, start)
    return max(int(delta.total_seconds() // 60), 0)


def worked_minutes(record: DayRecord) -> int:
    """Minutes worked across the completed morning and afternoon spans."""
    spans = (
        span_minutes(record.start_am, record.end_am),
        span_minutes(record.start_pm, record.end_pm),
    )
    return sum(m for m in spans if m is not None)


def format_duration(minutes: int) -> str:
    """Render minutes as e.g. "7h30"."""
    return f"{minutes // 60}h{minutes % 60:02d}"


def balance_note(worked: int, full_day: int | None = None) -> str | None:
    """Compare worked minutes with a full day.

    Returns None on an exact full day, otherwise e.g. "0h30 short of 8h00"
    or "1h15 overtime on 8h00".
    """
    full = full_day if full_day is not None else get_full_day_minutes()
    if worked == full:
        return None
    if worked < full:
        return f"{format_duration(full - worked)} short of {format_duration(full)}"
    return f"{format_duration(worked - full)} overtime on {format_duration(full)}"
