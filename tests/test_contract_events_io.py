from __future__ import annotations

import datetime as dt
import json
import tempfile
import unittest
from pathlib import Path

from daygrid.io import entry_to_dict, events_from_doc, layout_to_dict, load_events_from_json
from daygrid.model import DEFAULT_COLOR
from daygrid.arrangers import MergeEventArranger
from daygrid.validate import EventValidationError, assert_valid_events_doc, validate_events_doc


def _doc() -> dict:
    return {
        "date": "2024-03-04",
        "events": [
            {"title": "standup", "start": "09:00", "end": "09:15", "payload": {"id": 7}},
            {"title": "review", "start": "09:10", "end": "10:00", "color": "#ff0000"},
            {"title": "tbd", "start": None, "end": None},
            {"title": "tomorrow", "date": "2024-03-05", "start": "08:00", "end": "08:30"},
        ],
    }


class TestEventsIoContract(unittest.TestCase):
    def test_valid_doc_has_no_errors(self) -> None:
        self.assertEqual(validate_events_doc(_doc()), [])

    def test_bare_list_is_accepted(self) -> None:
        doc = [{"date": "2024-03-04", "start": "10:00", "end": "11:00"}]
        self.assertEqual(validate_events_doc(doc), [])
        self.assertEqual(len(events_from_doc(doc)), 1)

    def test_validation_errors(self) -> None:
        doc = {
            "events": [
                {"start": "25:00", "end": "10:00"},
                {"date": "03/04/2024", "start": "09:00", "end": 930},
                "nope",
            ]
        }
        errs = validate_events_doc(doc)

        self.assertIn("doc: events[0].date is required when the document has no date", errs)
        self.assertIn("doc: events[0].start must be HH:MM (got '25:00')", errs)
        self.assertIn("doc: events[1].date must be YYYY-MM-DD (got '03/04/2024')", errs)
        self.assertIn("doc: events[1].end must be HH:MM string or null", errs)
        self.assertIn("doc: events[2] must be dict", errs)

    def test_non_container_doc(self) -> None:
        self.assertEqual(validate_events_doc("x"), ["doc: must be an object or a list of events"])
        with self.assertRaises(EventValidationError):
            assert_valid_events_doc({"date": "2024-03-04"})

    def test_events_from_doc(self) -> None:
        events = events_from_doc(_doc())

        self.assertEqual(len(events), 4)
        standup, review, tbd, tomorrow = events
        self.assertEqual(standup.date, dt.date(2024, 3, 4))
        self.assertEqual((standup.start_time, standup.end_time), (dt.time(9, 0), dt.time(9, 15)))
        self.assertEqual(standup.payload, {"id": 7})
        self.assertEqual(standup.color, DEFAULT_COLOR)
        self.assertEqual(review.color, "#ff0000")
        self.assertIsNone(tbd.start_time)
        self.assertFalse(tbd.is_well_formed())
        self.assertEqual(tomorrow.date, dt.date(2024, 3, 5))

    def test_load_events_from_json_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "events.json"
            p.write_text(json.dumps(_doc()), encoding="utf-8")
            events = load_events_from_json(p)
        self.assertEqual([e.title for e in events], ["standup", "review", "tbd", "tomorrow"])

    def test_layout_to_dict(self) -> None:
        events = events_from_doc(_doc())[:2]
        entries = MergeEventArranger().arrange(events, 1440.0, 1.0)

        out = layout_to_dict(entries, arranger="merge", height=1440.0, height_per_minute=1.0, starting_hour=0)

        self.assertEqual(out["arranger"], "merge")
        self.assertEqual(len(out["entries"]), 1)
        e = out["entries"][0]
        self.assertEqual((e["start"], e["end"]), ("09:00", "10:00"))
        self.assertEqual([x["title"] for x in e["events"]], ["standup", "review"])
        self.assertEqual(e["events"][0]["payload"], {"id": 7})
        self.assertNotIn("payload", e["events"][1])
        json.dumps(out)

    def test_range_end_prints_as_24h(self) -> None:
        events = events_from_doc([{"date": "2024-03-04", "start": "23:00", "end": "23:30"}])
        entries = MergeEventArranger().arrange(events, 1440.0, 1.0, 1)
        self.assertEqual(entry_to_dict(entries[0])["end"], "22:30")

        wrapped = events_from_doc([{"date": "2024-03-04", "start": "00:30", "end": "02:00"}])
        entries = MergeEventArranger().arrange(wrapped, 1440.0, 1.0, 1)
        self.assertEqual([entry_to_dict(e)["end"] for e in entries], ["24:00", "01:00"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
