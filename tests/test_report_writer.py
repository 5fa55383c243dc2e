import tempfile
import unittest
from pathlib import Path

from forensic_triage.errors import EmptyLogError
from forensic_triage.report_writer import REPORT_HEADER, ReportWriter
from forensic_triage.session_log import SessionLog


class TestSessionLog(unittest.TestCase):
    def test_append_clear_and_order(self):
        log = SessionLog()
        self.assertTrue(log.is_empty())
        log.append("first")
        log.append("second")
        self.assertEqual(list(log), ["first", "second"])
        self.assertEqual(log.entries, ("first", "second"))
        log.clear()
        self.assertEqual(len(log), 0)

    def test_entries_snapshot_is_immutable(self):
        log = SessionLog()
        log.append("only")
        snapshot = log.entries
        log.append("later")
        self.assertEqual(snapshot, ("only",))


class TestReportWriter(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.test_dir.name)
        self.reports_dir = self.root / "forensic_reports"
        self.writer = ReportWriter(self.reports_dir)

    def tearDown(self):
        self.test_dir.cleanup()

    def test_empty_log_refused(self):
        with self.assertRaises(EmptyLogError):
            self.writer.write(SessionLog())
        self.assertFalse(self.reports_dir.exists() and any(self.reports_dir.iterdir()))

    def test_numbered_lines_in_insertion_order(self):
        log = SessionLog()
        entries = ["Scanned directory: /tmp (3 entries)", "Metadata viewed for: /tmp/a, size=1",
                   "Keyword search: 'x' under /tmp -> 0 match(es)"]
        for entry in entries:
            log.append(entry)

        path = self.writer.write(log)

        self.assertRegex(path.name, r"^report_\d+\.txt$")
        lines = path.read_text(encoding="utf-8").splitlines()
        self.assertEqual(lines[0], REPORT_HEADER)
        self.assertTrue(lines[1].startswith("Generated on: "))
        self.assertEqual(lines[2], "")
        self.assertEqual(lines[3:], [f"{i}) {e}" for i, e in enumerate(entries, start=1)])
        self.assertEqual(log.entries, tuple(entries))

    def test_report_names_are_unique(self):
        log = SessionLog()
        log.append("something happened")
        paths = {self.writer.write(log) for _ in range(5)}
        self.assertEqual(len(paths), 5)

    def test_write_failure_leaves_log_untouched(self):
        blocker = self.root / "not_a_dir"
        blocker.write_text("file in the way")
        log = SessionLog()
        log.append("kept")
        with self.assertRaises(OSError):
            ReportWriter(blocker).write(log)
        self.assertEqual(log.entries, ("kept",))


if __name__ == '__main__':
    unittest.main()
