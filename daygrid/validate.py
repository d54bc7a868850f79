"""Event document validation helpers (library-facing)."""

from __future__ import annotations

from typing import Any, List, Optional

from daygrid.util.timeparse import parse_date_yyyy_mm_dd, parse_hhmm


class EventValidationError(ValueError):
    """Raised when an event document fails validation."""


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def _check_hhmm(v: Any, label: str, errs: List[str]) -> None:
    # Missing times are allowed here; the arrangers drop those events.
    if v is None:
        return
    if not isinstance(v, str):
        errs.append(f"{label} must be HH:MM string or null")
        return
    if not v.strip():
        return
    try:
        parse_hhmm(v)
    except ValueError:
        errs.append(f"{label} must be HH:MM (got {v!r})")


def _check_date(v: Any, label: str, errs: List[str]) -> bool:
    if not isinstance(v, str):
        errs.append(f"{label} must be YYYY-MM-DD string")
        return False
    try:
        parse_date_yyyy_mm_dd(v)
    except ValueError:
        errs.append(f"{label} must be YYYY-MM-DD (got {v!r})")
        return False
    return True


def _events_list(doc: Any) -> Optional[list]:
    if isinstance(doc, list):
        return doc
    if isinstance(doc, dict) and isinstance(doc.get("events"), list):
        return doc["events"]
    return None


def validate_events_doc(doc: Any, *, label: str = "doc") -> List[str]:
    errs: List[str] = []

    if not isinstance(doc, (dict, list)):
        return [f"{label}: must be an object or a list of events"]

    has_default_date = False
    if isinstance(doc, dict):
        _require("events" in doc, f"{label}: missing key: events", errs)
        _require(
            "events" not in doc or isinstance(doc.get("events"), list),
            f"{label}: events must be list",
            errs,
        )
        if doc.get("date") is not None:
            has_default_date = _check_date(doc.get("date"), f"{label}: date", errs)

    events = _events_list(doc)
    if events is None:
        return errs

    for i, ev in enumerate(events):
        where = f"{label}: events[{i}]"
        if not isinstance(ev, dict):
            errs.append(f"{where} must be dict")
            continue

        if ev.get("date") is not None:
            _check_date(ev.get("date"), f"{where}.date", errs)
        else:
            _require(has_default_date, f"{where}.date is required when the document has no date", errs)

        _check_hhmm(ev.get("start"), f"{where}.start", errs)
        _check_hhmm(ev.get("end"), f"{where}.end", errs)

        for k in ("title", "description", "color"):
            v = ev.get(k)
            _require(v is None or isinstance(v, str), f"{where}.{k} must be string", errs)

    return errs


def assert_valid_events_doc(doc: Any) -> None:
    errs = validate_events_doc(doc)
    if errs:
        raise EventValidationError(errs[0])


__all__ = [
    "EventValidationError",
    "assert_valid_events_doc",
    "validate_events_doc",
]
