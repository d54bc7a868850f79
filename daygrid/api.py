"""daygrid.api

Stable *library* entrypoint for daygrid.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

from daygrid.arrangers import (
    ArrangeError,
    EventArranger,
    MergeEventArranger,
    SideEventArranger,
    get_arranger,
)
from daygrid.grid import (
    day_height,
    hour_rows,
    live_time_offset,
    minute_slots,
    tile_flex,
    time_at_offset,
)
from daygrid.io import layout_to_dict, load_events_from_json
from daygrid.model import ArrangedEvent, CalendarEvent
from daygrid.validate import EventValidationError, validate_events_doc


def arrange_events(
    events: Sequence[CalendarEvent[Any]],
    *,
    arranger: Union[str, EventArranger] = "side",
    height: Optional[float] = None,
    height_per_minute: float = 1.0,
    starting_hour: int = 0,
) -> List[ArrangedEvent[Any]]:
    """Arrange one day's events; `height` defaults to a full 24h grid."""
    impl = arranger if isinstance(arranger, EventArranger) else get_arranger(arranger)
    if height is None:
        if not isinstance(height_per_minute, (int, float)) or height_per_minute <= 0:
            raise ArrangeError(f"height_per_minute must be > 0 (got {height_per_minute!r})")
        height = day_height(height_per_minute)
    return impl.arrange(events, height, height_per_minute, starting_hour)


# --- Public API exports (locked by contract tests) ------------------------
# Keep changes intentional and reviewable.
# Prefer append-only unless you are intentionally reshaping the public surface.
_PUBLIC_EXPORTS = (
    "ArrangeError",
    "ArrangedEvent",
    "CalendarEvent",
    "EventArranger",
    "EventValidationError",
    "MergeEventArranger",
    "SideEventArranger",
    "arrange_events",
    "day_height",
    "get_arranger",
    "hour_rows",
    "layout_to_dict",
    "live_time_offset",
    "load_events_from_json",
    "minute_slots",
    "tile_flex",
    "time_at_offset",
    "validate_events_doc",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
