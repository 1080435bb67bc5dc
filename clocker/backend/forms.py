"""Day records and their four ordered time slots.

A day is split into a morning span (start_am/end_am) and an afternoon span
(start_pm/end_pm). Slots are only ever filled front to back.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from typing import Any

from .errors import ShiftAlreadyComplete
from .parsers import format_clock_time


class TimeSlot(Enum):
    """Slot positions in filling order; the value is the CSV column name."""

    START_AM = "start_am"
    END_AM = "end_am"
    START_PM = "start_pm"
    END_PM = "end_pm"


SLOT_ORDER: tuple[TimeSlot, ...] = tuple(TimeSlot)


@dataclass
class DayRecord:
    """One row of the timelog: a date and up to four clock times."""

    date: date
    start_am: time | None = None
    end_am: time | None = None
    start_pm: time | None = None
    end_pm: time | None = None

    def get(self, slot: TimeSlot) -> time | None:
        return getattr(self, slot.value)

    def slots(self) -> list[time | None]:
        """Slot values in filling order."""
        return [self.get(s) for s in SLOT_ORDER]

    def next_empty_slot(self) -> TimeSlot | None:
        """First unset slot, or None when the shift is complete."""
        for slot in SLOT_ORDER:
            if self.get(slot) is None:
                return slot
        return None

    def is_complete(self) -> bool:
        return self.next_empty_slot() is None

    def fill(self, at: time) -> TimeSlot:
        """Write `at` into the next empty slot and return that slot.

        Raises ShiftAlreadyComplete, without touching the record, when all
        four slots are set.
        """
        slot = self.next_empty_slot()
        if slot is None:
            raise ShiftAlreadyComplete(self.date)
        setattr(self, slot.value, at.replace(second=0, microsecond=0))
        return slot


def from_dict(data: dict[str, Any]) -> DayRecord:
    """Build a record from already-parsed values keyed by column name."""
    return DayRecord(
        date=data["date"],
        start_am=data.get("start_am"),
        end_am=data.get("end_am"),
        start_pm=data.get("start_pm"),
        end_pm=data.get("end_pm"),
    )


def to_dict(record: DayRecord) -> dict[str, str]:
    """Render a record as CSV-ready strings keyed by column name."""
    row = {"date": record.date.isoformat()}
    for slot in SLOT_ORDER:
        row[slot.value] = format_clock_time(record.get(slot))
    return row


def validate(record: DayRecord) -> list[str]:
    """Return human-readable issues if slots are not filled prefix-wise."""
    issues: list[str] = []
    gap: TimeSlot | None = None
    for slot in SLOT_ORDER:
        value = record.get(slot)
        if value is None:
            if gap is None:
                gap = slot
        elif gap is not None:
            issues.append(
                f"{slot.value} is set while {gap.value} is empty on {record.date.isoformat()}"
            )
    return issues
