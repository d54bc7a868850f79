# daygrid/util/timeparse.py
from __future__ import annotations

import datetime as dt
import re
from typing import Optional, Tuple

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_hhmm(s: str) -> Tuple[int, int]:
    m = _HHMM_RE.match(s.strip())
    if not m:
        raise ValueError(f"Invalid HH:MM: {s!r}")
    hh = int(m.group(1))
    mm = int(m.group(2))
    if not (0 <= hh <= 23 and 0 <= mm <= 59):
        raise ValueError(f"Invalid HH:MM: {s!r}")
    return hh, mm


def parse_time(s: Optional[str]) -> Optional[dt.time]:
    """`HH:MM` -> datetime.time. None and blank strings map to None."""
    if s is None:
        return None
    ss = str(s).strip()
    if not ss:
        return None
    hh, mm = parse_hhmm(ss)
    return dt.time(hh, mm)


def parse_date_yyyy_mm_dd(s: str) -> dt.date:
    return dt.datetime.strptime(s, "%Y-%m-%d").date()


def parse_starting_hour(s: str) -> int:
    """Accept `7` or `07:00` (minutes must be zero)."""
    ss = str(s).strip()
    if ":" in ss:
        hh, mm = parse_hhmm(ss)
        if mm != 0:
            raise ValueError(f"starting hour must be a whole hour: {s!r}")
        return hh
    try:
        hh = int(ss)
    except ValueError as ex:
        raise ValueError(f"Invalid starting hour: {s!r}") from ex
    if not (0 <= hh <= 23):
        raise ValueError(f"starting hour must be in 0..23: {s!r}")
    return hh
