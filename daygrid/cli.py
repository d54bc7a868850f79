from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from .api import arrange_events
from .arrangers import ARRANGERS, ArrangeError
from .grid import day_height
from .io import dump_layout_json, layout_to_dict, load_events_from_json
from .util.console import warn
from .util.timeparse import parse_starting_hour
from .validate import EventValidationError

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(
        description="Arrange a day's events (JSON) into a day-grid layout plan (JSON)."
    )
    ap.add_argument("events", help="Events JSON file ({'date':..., 'events':[...]} or a list of events)")
    ap.add_argument(
        "--arranger",
        default=os.getenv("DAYGRID_ARRANGER", "side"),
        help="Arrangement strategy: side | merge (default: env DAYGRID_ARRANGER or 'side')",
    )
    ap.add_argument(
        "--px-per-min",
        type=float,
        default=os.getenv("DAYGRID_PX_PER_MIN", "1.0"),
        help="Vertical scale in pixels per minute (default: env DAYGRID_PX_PER_MIN or 1.0)",
    )
    ap.add_argument(
        "--height",
        type=float,
        default=None,
        help="Total grid height in pixels (default: 24h at --px-per-min)",
    )
    ap.add_argument(
        "--start-hour",
        default=os.getenv("DAYGRID_START_HOUR", "0"),
        help="Hour the visual day begins at, e.g. 7 or 07:00 (default: env DAYGRID_START_HOUR or 0)",
    )
    ap.add_argument("--out", default=None, help="Write layout JSON here instead of stdout")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-v info, -vv debug)")

    args = ap.parse_args(argv)
    _setup_logging(int(args.verbose))

    arranger = str(args.arranger).strip().lower()
    if arranger not in ARRANGERS:
        raise SystemExit(f"Invalid --arranger value: {args.arranger!r} (expected one of: {', '.join(sorted(ARRANGERS))})")

    try:
        starting_hour = parse_starting_hour(args.start_hour)
    except ValueError as e:
        raise SystemExit(f"Invalid --start-hour value: {e}")

    if args.px_per_min <= 0:
        raise SystemExit("Invalid --px-per-min value: must be > 0")
    height = float(args.height) if args.height is not None else day_height(args.px_per_min)

    try:
        events = load_events_from_json(Path(args.events))
    except OSError as e:
        raise SystemExit(f"Failed to read events: {e}")
    except json.JSONDecodeError as e:
        raise SystemExit(f"Failed to parse events JSON: {e}")
    except EventValidationError as e:
        raise SystemExit(f"Invalid events document: {e}")

    try:
        entries = arrange_events(
            events,
            arranger=arranger,
            height=height,
            height_per_minute=float(args.px_per_min),
            starting_hour=starting_hour,
        )
    except ArrangeError as e:
        raise SystemExit(f"Cannot arrange events: {e}")

    placed = {id(ev) for entry in entries for ev in entry.events}
    dropped = sum(1 for ev in events if id(ev) not in placed)
    if dropped:
        warn(f"{dropped} event(s) skipped (missing time or end not after start)")
    logger.info("arranged %d events into %d entries (%s)", len(events), len(entries), arranger)

    text = dump_layout_json(
        layout_to_dict(
            entries,
            arranger=arranger,
            height=height,
            height_per_minute=float(args.px_per_min),
            starting_hour=starting_hour,
        )
    )

    if args.out:
        out_path = Path(args.out)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            raise SystemExit(f"Cannot write '{out_path}': {e}")
        print(str(out_path))
    else:
        sys.stdout.write(text + "\n")


if __name__ == "__main__":
    main()
