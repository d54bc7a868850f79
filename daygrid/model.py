# daygrid/model.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Tuple, TypeVar

from .util.minutes import total_minutes

T = TypeVar("T")

DEFAULT_COLOR = "#2196f3"


@dataclass(frozen=True)
class CalendarEvent(Generic[T]):
    date: dt.date
    start_time: Optional[dt.time]
    end_time: Optional[dt.time]

    title: str = ""
    description: str = ""
    color: str = DEFAULT_COLOR

    payload: Optional[T] = None  # opaque, never inspected by the arrangers

    def is_well_formed(self) -> bool:
        if self.start_time is None or self.end_time is None:
            return False
        return total_minutes(self.end_time) > total_minutes(self.start_time)

    def describe(self) -> str:
        s = self.start_time.strftime("%H:%M") if self.start_time else "--:--"
        e = self.end_time.strftime("%H:%M") if self.end_time else "--:--"
        d = self.date.isoformat() if self.date else "????-??-??"
        return f"{self.title or '<untitled>'} {d} {s}-{e}"


@dataclass(frozen=True)
class ArrangedEvent(Generic[T]):
    top: float             # px from the top of the day grid
    bottom: float          # px from the bottom of the day grid
    left: float            # column index (0-based, inclusive)
    right: float           # column index (exclusive)
    columns: int           # total columns of the owning cluster

    start_minute: int      # normalized minutes-of-day
    end_minute: int

    events: Tuple[CalendarEvent[T], ...]

    def height(self, total_height: float) -> float:
        return total_height - self.top - self.bottom

    @property
    def width_fraction(self) -> float:
        if self.columns <= 0:
            return 0.0
        return (self.right - self.left) / float(self.columns)


@dataclass(frozen=True)
class Segment:
    """One event's normalized interval inside a cluster."""

    event: CalendarEvent[Any]
    start: int
    end: int
    order: Tuple[int, int]  # (input index, segment index)


@dataclass
class Cluster:
    start: int
    end: int
    segments: List[Segment] = field(default_factory=list)

    def overlaps(self, start: int, end: int) -> bool:
        # Touching endpoints count as overlap.
        return self.start <= end and start <= self.end

    def absorb(self, start: int, end: int) -> None:
        self.start = min(self.start, start)
        self.end = max(self.end, end)

    @property
    def events(self) -> Tuple[CalendarEvent[Any], ...]:
        out: List[CalendarEvent[Any]] = []
        seen: set[Tuple[int, int]] = set()
        for s in self.segments:
            # Both halves of a wrapped event can land in one cluster.
            key = (id(s.event), s.order[0])
            if key in seen:
                continue
            seen.add(key)
            out.append(s.event)
        return tuple(out)


@dataclass(frozen=True)
class TileFlex:
    leading: int
    span: int
    trailing: int


__all__ = [
    "CalendarEvent",
    "ArrangedEvent",
    "Segment",
    "Cluster",
    "TileFlex",
    "DEFAULT_COLOR",
]
