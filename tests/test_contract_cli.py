from __future__ import annotations

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from daygrid import cli

DOC = {
    "date": "2024-03-04",
    "events": [
        {"title": "a", "start": "00:00", "end": "01:00"},
        {"title": "b", "start": "00:30", "end": "01:30"},
        {"title": "c", "start": "00:45", "end": "01:15"},
        {"title": "broken", "start": "03:00", "end": "02:00"},
    ],
}


class TestCliContract(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.tmp = Path(self._td.name)
        self.events_path = self.tmp / "events.json"
        self.events_path.write_text(json.dumps(DOC), encoding="utf-8")

    def tearDown(self) -> None:
        self._td.cleanup()

    def _run(self, *argv: str) -> tuple[str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            cli.main(list(argv))
        return out.getvalue(), err.getvalue()

    def test_side_layout_to_stdout(self) -> None:
        stdout, stderr = self._run(str(self.events_path))

        layout = json.loads(stdout)
        self.assertEqual(layout["arranger"], "side")
        self.assertEqual(layout["height"], 1440.0)
        self.assertEqual([e["left"] for e in layout["entries"]], [0.0, 1.0, 2.0])
        self.assertEqual({e["columns"] for e in layout["entries"]}, {3})
        self.assertIn("[daygrid] WARN: 1 event(s) skipped", stderr)

    def test_merge_layout_to_file(self) -> None:
        out_path = self.tmp / "build" / "layout.json"

        stdout, _ = self._run(str(self.events_path), "--arranger", "merge", "--out", str(out_path), "--px-per-min", "2")

        self.assertEqual(stdout.strip(), str(out_path))
        layout = json.loads(out_path.read_text(encoding="utf-8"))
        self.assertEqual(layout["height"], 2880.0)
        self.assertEqual(len(layout["entries"]), 1)
        self.assertEqual(layout["entries"][0]["bottom"], 2880.0 - 180.0)

    def test_env_defaults(self) -> None:
        with patch.dict(os.environ, {"DAYGRID_ARRANGER": "merge", "DAYGRID_START_HOUR": "07:00"}):
            stdout, _ = self._run(str(self.events_path))
        layout = json.loads(stdout)
        self.assertEqual(layout["arranger"], "merge")
        self.assertEqual(layout["starting_hour"], 7)
        self.assertEqual(layout["entries"][0]["start"], "17:00")

    def test_user_errors_exit_with_message(self) -> None:
        cases = [
            (["--arranger", "stack"], "Invalid --arranger value"),
            (["--start-hour", "7:30"], "Invalid --start-hour value"),
            (["--start-hour", "24"], "Invalid --start-hour value"),
            (["--px-per-min", "0"], "Invalid --px-per-min value"),
        ]
        for extra, msg in cases:
            with self.subTest(extra=extra):
                with self.assertRaises(SystemExit) as ctx:
                    self._run(str(self.events_path), *extra)
                self.assertIn(msg, str(ctx.exception))

    def test_missing_file(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self._run(str(self.tmp / "nope.json"))
        self.assertIn("Failed to read events", str(ctx.exception))

    def test_bad_json_and_bad_document(self) -> None:
        bad_json = self.tmp / "bad.json"
        bad_json.write_text("{not json", encoding="utf-8")
        with self.assertRaises(SystemExit) as ctx:
            self._run(str(bad_json))
        self.assertIn("Failed to parse events JSON", str(ctx.exception))

        bad_doc = self.tmp / "doc.json"
        bad_doc.write_text(json.dumps({"events": [{"start": "9am"}]}), encoding="utf-8")
        with self.assertRaises(SystemExit) as ctx:
            self._run(str(bad_doc))
        self.assertIn("Invalid events document", str(ctx.exception))


if __name__ == "__main__":
    unittest.main(verbosity=2)
