"""Terminal rendering for `clocker view`."""

from __future__ import annotations

from datetime import time

from typing_extensions import NotRequired, TypedDict

from .forms import DayRecord
from .parsers import format_clock_time
from .timelog import Timelog
from .utils import balance_note, format_duration, worked_minutes

VIEW_SCOPES = ("latest", "all")


class DaySummary(TypedDict):
    """Display fields for one day.

    Fields:
        date: ISO date.
        morning: "HH:MM-HH:MM", open-ended "HH:MM-" or "-" when unset.
        afternoon: same shape as morning.
        worked: total of completed spans, e.g. "7h30".
        note: time short of or over a full day, only for complete shifts.
    """

    date: str
    morning: str
    afternoon: str
    worked: str
    note: NotRequired[str]


def summarize(record: DayRecord, full_day: int | None = None) -> DaySummary:
    minutes = worked_minutes(record)
    summary: DaySummary = {
        "date": record.date.isoformat(),
        "morning": _span(record.start_am, record.end_am),
        "afternoon": _span(record.start_pm, record.end_pm),
        "worked": format_duration(minutes),
    }
    if record.is_complete():
        note = balance_note(minutes, full_day)
        if note:
            summary["note"] = note
    return summary


def render_view(timelog: Timelog, scope: str = "latest", full_day: int | None = None) -> str:
    """Render the latest record or all records, one line per day."""
    if scope not in VIEW_SCOPES:
        raise ValueError(f"Unknown view scope: {scope} (expected one of {', '.join(VIEW_SCOPES)})")
    if scope == "latest":
        latest = timelog.latest()
        records = [latest] if latest is not None else []
    else:
        records = list(timelog.records)
    if not records:
        return "No entries."
    return "\n".join(_render_line(summarize(r, full_day)) for r in records)


def _render_line(summary: DaySummary) -> str:
    parts = [
        summary["date"],
        f"{summary['morning']:<11}",
        f"{summary['afternoon']:<11}",
        summary["worked"],
    ]
    line = "  ".join(parts)
    note = summary.get("note")
    return f"{line}  ({note})" if note else line


def _span(start: time | None, end: time | None) -> str:
    if start is None:
        return "-"
    return f"{format_clock_time(start)}-{format_clock_time(end)}"
