from datetime import date, datetime

from clocker.backend.forms import DayRecord
from clocker.backend.timelog import Timelog
from clocker.backend.transitions import archive, new_month

HEADER = "date,start_am,end_am,start_pm,end_pm\n"


def test_archive_logs_then_snapshots_and_resets():
    text = HEADER + "2025-01-14,08:00,12:00,13:00,17:00\n2025-01-15,08:30,,,\n"
    log = Timelog.parse(text)
    now = datetime(2025, 1, 15, 12, 0)

    expected = Timelog.parse(text)
    expected.log_now(now)

    rollover = archive(log, now)
    assert rollover.backup.to_csv() == expected.to_csv()
    assert rollover.primary == Timelog.empty()
    assert rollover.primary.to_csv() == HEADER
    # The input timelog is not mutated.
    assert log.to_csv() == text


def test_archive_on_complete_shift_snapshots_as_is(caplog):
    text = HEADER + "2025-01-15,08:30,12:00,13:00,17:30\n"
    rollover = archive(Timelog.parse(text), datetime(2025, 1, 15, 18, 0))
    assert rollover.backup.to_csv() == text
    assert rollover.primary == Timelog.empty()
    assert "already complete" in caplog.text


def test_new_month_backs_up_unchanged_and_seeds_today():
    text = HEADER + "2025-01-31,08:30,12:00,13:00,17:30\n"
    log = Timelog.parse(text)
    rollover = new_month(log, date(2025, 2, 1))
    assert rollover.backup.to_csv() == text
    assert rollover.primary.records == [DayRecord(date=date(2025, 2, 1))]
    assert rollover.primary.to_csv() == HEADER + "2025-02-01,,,,\n"
    # A seeded day is filled by the next log.
    rollover.primary.log_now(datetime(2025, 2, 1, 8, 0))
    assert rollover.primary.to_csv() == HEADER + "2025-02-01,08:00,,,\n"
