"""Sources of "now" for the timelog commands.

A clock is any zero-argument callable returning a naive local datetime at
minute precision. Commands take one as a parameter so tests never depend on
the wall clock.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from datetime import datetime

from .parsers import parse_timestamp

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Local wall-clock time with seconds dropped."""
    return datetime.now().replace(second=0, microsecond=0)


def fixed_clock(moment: datetime) -> Clock:
    """Return a clock that always reports `moment`."""
    pinned = moment.replace(second=0, microsecond=0)

    def _now() -> datetime:
        return pinned

    return _now


def clock_from_env(env_var: str = "CLOCKER_NOW") -> Clock:
    """Use a pinned time from the environment when set, else the system clock.

    Raises ValueError when the variable is set but not `YYYY-MM-DDTHH:MM`.
    """
    raw = os.environ.get(env_var)
    if not raw:
        return system_clock
    moment = parse_timestamp(raw)
    if moment is None:
        raise ValueError(f"{env_var} must look like YYYY-MM-DDTHH:MM, got {raw!r}")
    return fixed_clock(moment)
