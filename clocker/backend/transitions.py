"""Whole-file transitions: archive and new-month.

Both return the content for the backup file and the replacement content for
the primary file; neither mutates the timelog passed in.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from datetime import date, datetime

from .errors import ShiftAlreadyComplete
from .forms import DayRecord
from .timelog import Timelog

logger = logging.getLogger(__name__)


@dataclass
class Rollover:
    """Result of a transition."""

    backup: Timelog
    primary: Timelog


def archive(timelog: Timelog, now: datetime) -> Rollover:
    """Log `now`, snapshot the result as the backup and start an empty timelog.

    When today's shift is already complete the snapshot is taken as is.
    """
    snapshot = copy.deepcopy(timelog)
    try:
        snapshot.log_now(now)
    except ShiftAlreadyComplete as e:
        logger.warning("%s Archiving without a new stamp.", e)
    return Rollover(backup=snapshot, primary=Timelog.empty())


def new_month(timelog: Timelog, today: date) -> Rollover:
    """Snapshot the timelog unchanged and start a new one seeded with `today`."""
    return Rollover(
        backup=copy.deepcopy(timelog),
        primary=Timelog(records=[DayRecord(date=today)]),
    )
