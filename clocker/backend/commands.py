"""Sub-command dispatch for the timelog CLI.

The handler turns previously read file text plus a command name into the
texts to write and the message to show. It never touches the filesystem, so
a failure at any step leaves nothing half-written.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .clock import Clock, system_clock
from .timelog import Timelog
from .transitions import archive, new_month
from .view import render_view


@dataclass
class CommandOutcome:
    """What the caller should persist and print after a command."""

    command: str
    output_text: str | None = None
    backup_text: str | None = None
    message: str | None = None


class CommandHandler:
    """Runs one command against one timelog."""

    def __init__(self, clock: Clock = system_clock, full_day_minutes: int | None = None) -> None:
        self.clock = clock
        self.full_day_minutes = full_day_minutes

    def run(self, command: str, source_text: str | None, scope: str = "latest") -> CommandOutcome:
        """Parse `source_text` and dispatch to the named command.

        Raises ValueError for an unknown command and lets ClockerError
        subclasses propagate.
        """
        steps: dict[str, Callable[[Timelog], CommandOutcome]] = {
            "log": self.log,
            "view": lambda timelog: self.view(timelog, scope),
            "archive": self.archive,
            "new-month": self.new_month,
        }
        step = steps.get(command)
        if step is None:
            raise ValueError(f"Unknown command: {command} (expected one of {', '.join(steps)})")
        return step(Timelog.parse(source_text))

    def log(self, timelog: Timelog) -> CommandOutcome:
        now = self.clock()
        slot = timelog.log_now(now)
        return CommandOutcome(
            command="log",
            output_text=timelog.to_csv(),
            message=f"{now.date().isoformat()} {slot.value} {now:%H:%M}",
        )

    def view(self, timelog: Timelog, scope: str = "latest") -> CommandOutcome:
        return CommandOutcome(
            command="view",
            message=render_view(timelog, scope, self.full_day_minutes),
        )

    def archive(self, timelog: Timelog) -> CommandOutcome:
        rollover = archive(timelog, self.clock())
        return CommandOutcome(
            command="archive",
            output_text=rollover.primary.to_csv(),
            backup_text=rollover.backup.to_csv(),
            message=f"Archived {len(rollover.backup.records)} day(s).",
        )

    def new_month(self, timelog: Timelog) -> CommandOutcome:
        today = self.clock().date()
        rollover = new_month(timelog, today)
        return CommandOutcome(
            command="new-month",
            output_text=rollover.primary.to_csv(),
            backup_text=rollover.backup.to_csv(),
            message=f"Archived {len(rollover.backup.records)} day(s), started {today.isoformat()}.",
        )
