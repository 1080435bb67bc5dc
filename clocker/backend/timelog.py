"""The timelog: an append-ordered list of day records backed by CSV text."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from .errors import CsvProblem, MalformedCsv
from .exporters.csv import iter_rows, render_csv
from .forms import SLOT_ORDER, DayRecord, TimeSlot, from_dict, to_dict, validate
from .parsers import parse_clock_time, parse_iso_date

HEADERS: list[str] = ["date"] + [s.value for s in SLOT_ORDER]


@dataclass
class Timelog:
    """Day records in file order, at most one per date."""

    records: list[DayRecord] = field(default_factory=list)

    @classmethod
    def empty(cls) -> Timelog:
        return cls()

    @classmethod
    def parse(cls, text: str | None) -> Timelog:
        """Parse timelog CSV text.

        - The first line is taken as the header and not checked.
        - Every other non-blank line needs exactly five fields: a
          `YYYY-MM-DD` date and four empty-or-`HH:MM` slots, filled front
          to back.
        - None or empty text gives an empty timelog.

        Raises MalformedCsv listing every offending line.
        """
        if not text:
            return cls.empty()
        problems: list[CsvProblem] = []
        records: list[DayRecord] = []
        seen: set[date] = set()
        for line_number, fields in iter_rows(text):
            if line_number == 1:
                continue
            line = ",".join(fields)
            record, reasons = _parse_row(fields)
            if record is not None:
                if record.date in seen:
                    reasons.append(f"duplicate row for {record.date.isoformat()}")
                seen.add(record.date)
            if reasons:
                problems.extend(CsvProblem(line_number, line, r) for r in reasons)
                continue
            records.append(record)
        if problems:
            raise MalformedCsv(problems)
        return cls(records=records)

    def to_csv(self) -> str:
        """Header plus one line per record, unset slots left empty."""
        return render_csv((to_dict(r) for r in self.records), HEADERS)

    def find(self, day: date) -> DayRecord | None:
        return next((r for r in self.records if r.date == day), None)

    def latest(self) -> DayRecord | None:
        return self.records[-1] if self.records else None

    def record_for(self, day: date) -> DayRecord:
        """Return the record for `day`, appending a blank one if there is none."""
        record = self.find(day)
        if record is None:
            record = DayRecord(date=day)
            self.records.append(record)
        return record

    def log_now(self, now: datetime) -> TimeSlot:
        """Stamp `now` into the next free slot of its day.

        Raises ShiftAlreadyComplete when that day is already full; the
        timelog is left as it was.
        """
        return self.record_for(now.date()).fill(now.time())


def _parse_row(fields: list[str]) -> tuple[DayRecord | None, list[str]]:
    """Convert raw fields to a record, or collect reasons it is invalid."""
    if len(fields) != len(HEADERS):
        return None, [f"expected {len(HEADERS)} fields, found {len(fields)}"]
    reasons: list[str] = []
    raw_date, *raw_slots = (f.strip() for f in fields)
    day = parse_iso_date(raw_date)
    if day is None:
        reasons.append(f"invalid date {_clip(raw_date)!r}, expected YYYY-MM-DD")
    values: dict[str, Any] = {"date": day}
    for slot, raw in zip(SLOT_ORDER, raw_slots):
        if not raw:
            continue
        at = parse_clock_time(raw)
        if at is None:
            reasons.append(f"invalid {slot.value} {_clip(raw)!r}, expected HH:MM")
        values[slot.value] = at
    if day is None:
        return None, reasons
    record = from_dict(values)
    if not reasons:
        reasons.extend(validate(record))
    return record, reasons


def _clip(value: str, limit: int = 20) -> str:
    return value if len(value) <= limit else value[: limit - 3] + "..."
