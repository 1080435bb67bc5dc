from datetime import date, time

import pytest

from clocker.backend.forms import DayRecord
from clocker.backend.timelog import Timelog
from clocker.backend.utils import (
    balance_note,
    format_duration,
    get_full_day_minutes,
    span_minutes,
    worked_minutes,
)
from clocker.backend.view import render_view, summarize

HEADER = "date,start_am,end_am,start_pm,end_pm\n"


def test_balance_note_full_day():
    assert balance_note(480, full_day=480) is None


def test_balance_note_short_and_overtime():
    assert balance_note(390, full_day=480) == "1h30 short of 8h00"
    assert balance_note(555, full_day=480) == "1h15 overtime on 8h00"


def test_full_day_minutes_from_env(monkeypatch):
    monkeypatch.setenv("CLOCKER_FULL_DAY_HOURS", "7.5")
    assert get_full_day_minutes() == 450
    assert balance_note(450) is None
    for bad in ("lots", "0", "-2", "inf"):
        monkeypatch.setenv("CLOCKER_FULL_DAY_HOURS", bad)
        assert get_full_day_minutes() == 480
    monkeypatch.delenv("CLOCKER_FULL_DAY_HOURS")
    assert get_full_day_minutes() == 480


def test_worked_minutes_counts_completed_spans_only():
    record = DayRecord(
        date=date(2025, 1, 15), start_am=time(8, 30), end_am=time(12, 0), start_pm=time(13, 0)
    )
    assert span_minutes(time(8, 30), time(12, 0)) == 210
    assert span_minutes(time(13, 0), None) is None
    assert worked_minutes(record) == 210
    assert format_duration(210) == "3h30"


def test_summarize_complete_short_day():
    record = DayRecord(
        date=date(2025, 1, 15),
        start_am=time(8, 0),
        end_am=time(12, 0),
        start_pm=time(13, 0),
        end_pm=time(16, 30),
    )
    summary = summarize(record, full_day=480)
    assert summary == {
        "date": "2025-01-15",
        "morning": "08:00-12:00",
        "afternoon": "13:00-16:30",
        "worked": "7h30",
        "note": "0h30 short of 8h00",
    }


def test_summarize_open_day_has_no_note():
    record = DayRecord(date=date(2025, 1, 16), start_am=time(9, 0))
    summary = summarize(record, full_day=480)
    assert summary["morning"] == "09:00-"
    assert summary["afternoon"] == "-"
    assert "note" not in summary


def test_render_view_latest_and_all():
    log = Timelog.parse(
        HEADER + "2025-01-15,08:30,12:00,13:00,17:30\n2025-01-16,09:00,,,\n"
    )
    latest = render_view(log, "latest", full_day=480)
    assert latest.startswith("2025-01-16")
    assert "\n" not in latest
    everything = render_view(log, "all", full_day=480).splitlines()
    assert everything[0] == "2025-01-15  08:30-12:00  13:00-17:30  8h00"
    assert everything[1].startswith("2025-01-16  09:00-")


def test_render_view_empty_and_unknown_scope():
    assert render_view(Timelog.empty(), "all") == "No entries."
    assert render_view(Timelog.empty(), "latest") == "No entries."
    with pytest.raises(ValueError):
        render_view(Timelog.empty(), "week")
