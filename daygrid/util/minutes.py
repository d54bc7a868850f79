# daygrid/util/minutes.py
from __future__ import annotations

import datetime as dt
from typing import Optional

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY


def total_minutes(t: dt.time) -> int:
    return t.hour * MINUTES_PER_HOUR + t.minute


def shift_minutes(minutes: int, starting_hour: int = 0) -> int:
    """Move a minutes-of-day value onto a grid whose day begins at `starting_hour`.

    Values that go negative wrap by one day, so with starting_hour=7 a 05:00
    event lands at 1320 (22 hours into the visual day).
    """
    out = int(minutes) - int(starting_hour) * MINUTES_PER_HOUR
    if out < 0:
        out += MINUTES_PER_DAY
    return out


def normalized_minutes(t: Optional[dt.time], starting_hour: int = 0) -> Optional[int]:
    if t is None:
        return None
    return shift_minutes(total_minutes(t), starting_hour)


def format_minutes(minutes: int) -> str:
    # 1440 is the end of the visible range and prints as 24:00.
    m = int(minutes)
    return f"{m // MINUTES_PER_HOUR:02d}:{m % MINUTES_PER_HOUR:02d}"
