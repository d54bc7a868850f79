# daygrid/arrangers/base.py
from __future__ import annotations

import abc
import logging
from typing import List, Sequence

from ..model import ArrangedEvent, CalendarEvent, Segment
from ..util.minutes import HOURS_PER_DAY, MINUTES_PER_DAY, normalized_minutes

logger = logging.getLogger(__name__)


class ArrangeError(ValueError):
    """Raised for invalid arrange parameters (not for bad event data)."""


def check_params(height: float, height_per_minute: float, starting_hour: int) -> None:
    if not isinstance(height_per_minute, (int, float)) or height_per_minute <= 0:
        raise ArrangeError(f"height_per_minute must be > 0 (got {height_per_minute!r})")
    if not isinstance(height, (int, float)) or height < 0:
        raise ArrangeError(f"height must be >= 0 (got {height!r})")
    if isinstance(starting_hour, bool) or not isinstance(starting_hour, int):
        raise ArrangeError(f"starting_hour must be an int (got {starting_hour!r})")
    if not (0 <= starting_hour < HOURS_PER_DAY):
        raise ArrangeError(f"starting_hour must be in 0..23 (got {starting_hour})")


def drop_malformed(event: CalendarEvent, *, where: str) -> bool:
    """Return True (after logging) when `event` cannot be placed on the grid."""
    if event.is_well_formed():
        return False
    logger.warning(
        "%s: dropping event (start/end missing or end not after start): %s",
        where,
        event.describe(),
    )
    return True


def split_segments(event: CalendarEvent, index: int, starting_hour: int) -> List[Segment]:
    """Normalized segments of a well-formed event.

    After the day-start shift an event can run past the bottom of the grid;
    it is then split into [start, 1440] and [0, end]. The second half has
    zero height when the event ends exactly at the day start.
    """
    start = normalized_minutes(event.start_time, starting_hour)
    end = normalized_minutes(event.end_time, starting_hour)
    if start is None or end is None:
        raise ArrangeError(f"cannot place event without start/end: {event.describe()}")

    if start < end:
        return [Segment(event=event, start=start, end=end, order=(index, 0))]
    return [
        Segment(event=event, start=start, end=MINUTES_PER_DAY, order=(index, 0)),
        Segment(event=event, start=0, end=end, order=(index, 1)),
    ]


def box(
    *,
    start: int,
    end: int,
    height: float,
    height_per_minute: float,
    left: float,
    right: float,
    columns: int,
    events: Sequence[CalendarEvent],
) -> ArrangedEvent:
    top = start * height_per_minute
    if end >= MINUTES_PER_DAY:
        bottom = 0.0
    else:
        bottom = height - end * height_per_minute
    return ArrangedEvent(
        top=float(top),
        bottom=float(bottom),
        left=float(left),
        right=float(right),
        columns=int(columns),
        start_minute=int(start),
        end_minute=int(end),
        events=tuple(events),
    )


class EventArranger(abc.ABC):
    """Turns a day's events into positioned boxes on a vertical time grid.

    Implementations are stateless; one instance may be shared freely.
    """

    name: str = ""

    @abc.abstractmethod
    def arrange(
        self,
        events: Sequence[CalendarEvent],
        height: float,
        height_per_minute: float,
        starting_hour: int = 0,
    ) -> List[ArrangedEvent]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
