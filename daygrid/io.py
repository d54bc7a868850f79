"""JSON I/O for event documents and layout plans."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from .model import DEFAULT_COLOR, ArrangedEvent, CalendarEvent
from .util.minutes import format_minutes
from .util.timeparse import parse_date_yyyy_mm_dd, parse_time
from .validate import assert_valid_events_doc

JsonPath = Union[str, Path]


def events_from_doc(doc: Any) -> List[CalendarEvent[Any]]:
    """Build events from a validated document.

    Accepted shapes:
      {"date": "2024-01-01", "events": [{"title": ..., "start": "09:00", "end": "10:00"}, ...]}
      [{"date": "2024-01-01", "start": ..., "end": ...}, ...]
    """
    assert_valid_events_doc(doc)

    default_date = None
    raw_events = doc
    if isinstance(doc, dict):
        if doc.get("date") is not None:
            default_date = parse_date_yyyy_mm_dd(doc["date"])
        raw_events = doc["events"]

    out: List[CalendarEvent[Any]] = []
    for raw in raw_events:
        d = parse_date_yyyy_mm_dd(raw["date"]) if raw.get("date") is not None else default_date
        out.append(
            CalendarEvent(
                date=d,
                start_time=parse_time(raw.get("start")),
                end_time=parse_time(raw.get("end")),
                title=raw.get("title") or "",
                description=raw.get("description") or "",
                color=raw.get("color") or DEFAULT_COLOR,
                payload=raw.get("payload"),
            )
        )
    return out


def load_events_from_json(path: JsonPath) -> List[CalendarEvent[Any]]:
    p = Path(path)
    doc = json.loads(p.read_text(encoding="utf-8", errors="replace"))
    return events_from_doc(doc)


def _hhmm(t: Any) -> Optional[str]:
    return t.strftime("%H:%M") if t is not None else None


def event_to_dict(ev: CalendarEvent[Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "title": ev.title,
        "date": ev.date.isoformat() if ev.date else None,
        "start": _hhmm(ev.start_time),
        "end": _hhmm(ev.end_time),
    }
    if ev.payload is not None:
        out["payload"] = ev.payload
    return out


def entry_to_dict(entry: ArrangedEvent[Any]) -> Dict[str, Any]:
    return {
        "top": entry.top,
        "bottom": entry.bottom,
        "left": entry.left,
        "right": entry.right,
        "columns": entry.columns,
        "start": format_minutes(entry.start_minute),
        "end": format_minutes(entry.end_minute),
        "events": [event_to_dict(e) for e in entry.events],
    }


def layout_to_dict(
    entries: Sequence[ArrangedEvent[Any]],
    *,
    arranger: str,
    height: float,
    height_per_minute: float,
    starting_hour: int,
) -> Dict[str, Any]:
    return {
        "arranger": arranger,
        "height": float(height),
        "height_per_minute": float(height_per_minute),
        "starting_hour": int(starting_hour),
        "entries": [entry_to_dict(e) for e in entries],
    }


def dump_layout_json(layout: Dict[str, Any]) -> str:
    return json.dumps(layout, ensure_ascii=False, indent=2, sort_keys=False)
