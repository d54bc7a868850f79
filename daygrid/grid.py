# daygrid/grid.py
"""Day-grid geometry shared by renderers.

All offsets are in the same pixel unit as `height_per_minute`; the grid's
first row is `starting_hour`, and hours past midnight belong to the next
calendar date.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import List, Union

from .model import ArrangedEvent, TileFlex
from .util.minutes import HOURS_PER_DAY, MINUTES_PER_DAY, MINUTES_PER_HOUR, shift_minutes, total_minutes


@dataclass(frozen=True)
class HourRow:
    index: int
    hour: int
    top: float
    labelled: bool  # first row has no label; it would sit on the top edge


@dataclass(frozen=True)
class MinuteSlot:
    top: float
    bottom: float
    at: dt.datetime


def day_height(height_per_minute: float) -> float:
    if height_per_minute <= 0:
        raise ValueError("height_per_minute must be > 0")
    return float(height_per_minute) * MINUTES_PER_HOUR * HOURS_PER_DAY


def _wall_clock(day: dt.date, grid_minute: int, starting_hour: int) -> dt.datetime:
    m = grid_minute + starting_hour * MINUTES_PER_HOUR
    extra_days, m = divmod(m, MINUTES_PER_DAY)
    d = day + dt.timedelta(days=extra_days)
    return dt.datetime(d.year, d.month, d.day, m // MINUTES_PER_HOUR, m % MINUTES_PER_HOUR)


def hour_rows(starting_hour: int, height_per_minute: float) -> List[HourRow]:
    hour_height = height_per_minute * MINUTES_PER_HOUR
    rows: List[HourRow] = []
    for index in range(HOURS_PER_DAY):
        hour = (index + starting_hour) % HOURS_PER_DAY
        rows.append(HourRow(index=index, hour=hour, top=hour_height * index, labelled=index > 0))
    return rows


def minute_slots(
    day: dt.date,
    slot_minutes: int,
    starting_hour: int,
    height_per_minute: float,
) -> List[MinuteSlot]:
    if slot_minutes <= 0 or MINUTES_PER_DAY % slot_minutes:
        raise ValueError(f"slot_minutes must divide {MINUTES_PER_DAY} (got {slot_minutes})")

    total = day_height(height_per_minute)
    per_slot = slot_minutes * height_per_minute
    count = MINUTES_PER_DAY // slot_minutes
    return [
        MinuteSlot(
            top=per_slot * i,
            bottom=total - per_slot * (i + 1),
            at=_wall_clock(day, slot_minutes * i, starting_hour),
        )
        for i in range(count)
    ]


def time_at_offset(
    day: dt.date,
    offset: float,
    starting_hour: int,
    height_per_minute: float,
    snap: int = 1,
) -> dt.datetime:
    if height_per_minute <= 0:
        raise ValueError("height_per_minute must be > 0")
    minute = int(offset // height_per_minute)
    minute = max(0, min(MINUTES_PER_DAY - 1, minute))
    if snap > 1:
        minute -= minute % snap
    return _wall_clock(day, minute, starting_hour)


def live_time_offset(
    now: Union[dt.datetime, dt.time],
    starting_hour: int,
    height_per_minute: float,
) -> float:
    t = now.time() if isinstance(now, dt.datetime) else now
    return shift_minutes(total_minutes(t), starting_hour) * height_per_minute


def tile_flex(entry: ArrangedEvent) -> TileFlex:
    return TileFlex(
        leading=int(round(entry.left)),
        span=int(round(entry.right - entry.left)),
        trailing=int(round(entry.columns - entry.right)),
    )
