"""Event arrangement strategies for the day grid."""

from __future__ import annotations

from typing import Dict, Type

from .base import ArrangeError, EventArranger
from .merge import MergeEventArranger, build_clusters
from .side import SideEventArranger, pack_columns

ARRANGERS: Dict[str, Type[EventArranger]] = {
    MergeEventArranger.name: MergeEventArranger,
    SideEventArranger.name: SideEventArranger,
}


def get_arranger(name: str) -> EventArranger:
    key = str(name or "").strip().lower()
    cls = ARRANGERS.get(key)
    if cls is None:
        known = ", ".join(sorted(ARRANGERS))
        raise ValueError(f"Unknown arranger: {name!r} (expected one of: {known})")
    return cls()


__all__ = [
    "ARRANGERS",
    "ArrangeError",
    "EventArranger",
    "MergeEventArranger",
    "SideEventArranger",
    "build_clusters",
    "get_arranger",
    "pack_columns",
]
