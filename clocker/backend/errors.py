"""Errors raised by the timelog core."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


class ClockerError(Exception):
    """Base class for every error the core can raise."""


@dataclass
class CsvProblem:
    """A single offending line in a timelog file."""

    line_number: int
    line: str
    reason: str

    def __str__(self) -> str:
        shown = self.line if len(self.line) <= 80 else self.line[:77] + "..."
        return f"line {self.line_number}: {self.reason} ({shown!r})"


class MalformedCsv(ClockerError):
    """The timelog text does not match the expected layout.

    Carries every problem found so the whole file can be fixed in one pass.
    """

    def __init__(self, problems: list[CsvProblem]) -> None:
        self.problems = list(problems)
        super().__init__(
            "Malformed lines in the input file:\n" + "\n".join(str(p) for p in self.problems)
        )


class ShiftAlreadyComplete(ClockerError):
    """All four slots of the day are already filled."""

    def __init__(self, day: date) -> None:
        self.day = day
        super().__init__(f"Shift already complete for {day.isoformat()}.")
