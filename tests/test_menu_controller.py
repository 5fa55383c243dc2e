import io
import tempfile
import unittest
from pathlib import Path

from rich.console import Console

from forensic_triage.config import TriageConfig
from forensic_triage.console_ui import TriageUI
from forensic_triage.menu_controller import Command, MenuController
from forensic_triage.session_log import SessionLog


class ScriptedInput:
    """Feeds canned answers to the menu; EOFError once exhausted"""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class TestCommand(unittest.TestCase):
    def test_parse(self):
        self.assertIs(Command.parse("1"), Command.SCAN_DIRECTORY)
        self.assertIs(Command.parse(" 8 "), Command.EXIT)
        self.assertIsNone(Command.parse("0"))
        self.assertIsNone(Command.parse("9"))
        self.assertIsNone(Command.parse("abc"))
        self.assertIsNone(Command.parse(""))


class TestMenuController(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.test_dir.name)
        self.config = TriageConfig(
            reports_dir=str(self.root / "forensic_reports"),
            recovered_dir=str(self.root / "recovered_files"),
        )
        self.out = io.StringIO()
        self.ui = TriageUI(Console(file=self.out, width=200, color_system=None, highlight=False))
        self.log = SessionLog()

        self.evidence = self.root / "evidence"
        self.evidence.mkdir()
        (self.evidence / "a.txt").write_bytes(b"hello world\n")
        (self.evidence / "b.log").write_bytes(b"nothing here\n")

    def tearDown(self):
        self.test_dir.cleanup()

    def run_menu(self, *answers):
        scripted = ScriptedInput(answers)
        controller = MenuController(self.config, self.log, self.ui, read_line=scripted)
        code = controller.run()
        return code, self.out.getvalue(), scripted

    def test_exit(self):
        code, output, _ = self.run_menu("8")
        self.assertEqual(code, 0)
        self.assertIn("DIGITAL FORENSICS & DATA RECOVERY TOOL", output)
        self.assertIn("Exiting... Goodbye!", output)

    def test_invalid_choices_reprompt(self):
        code, output, scripted = self.run_menu("x", "42", "8")
        self.assertEqual(code, 0)
        self.assertEqual(output.count("Invalid choice. Try again."), 2)
        self.assertEqual(scripted.prompts.count("Enter choice: "), 3)
        self.assertEqual(len(self.log), 0)

    def test_end_of_input_exits_cleanly(self):
        code, output, _ = self.run_menu()
        self.assertEqual(code, 0)
        self.assertIn("Exiting... Goodbye!", output)

    def test_scan_directory(self):
        _, output, _ = self.run_menu("1", str(self.evidence), "8")
        self.assertIn("a.txt", output)
        self.assertEqual(self.log.entries,
                         (f"Scanned directory: {self.evidence.absolute()} (2 entries)",))

    def test_bad_path_keeps_loop_alive(self):
        _, output, _ = self.run_menu("1", str(self.root / "nope"), "2", str(self.root / "nope"), "8")
        self.assertIn("Invalid directory path!", output)
        self.assertIn("File does not exist!", output)
        self.assertIn("Exiting... Goodbye!", output)
        self.assertEqual(len(self.log), 0)

    def test_metadata(self):
        _, output, _ = self.run_menu("2", str(self.evidence / "a.txt"), "8")
        self.assertIn("FILE METADATA", output)
        self.assertIn("12 bytes", output)
        self.assertIn("txt", output)

    def test_hash_with_default_algorithm(self):
        _, output, _ = self.run_menu("3", str(self.evidence / "a.txt"), "7", "8")
        self.assertIn("Invalid choice. Defaulting to SHA-256.", output)
        self.assertIn("SHA-256 hash: ", output)
        self.assertTrue(self.log.entries[0].startswith("Hash SHA-256 computed for: "))

    def test_hash_rejects_directory_before_algorithm_prompt(self):
        _, output, _ = self.run_menu("3", str(self.evidence), "8")
        self.assertIn("Invalid file path!", output)
        self.assertNotIn("Choose algorithm", output)

    def test_recover_to_default_destination(self):
        _, output, _ = self.run_menu("4", str(self.evidence), "", "8")
        recovered = Path(self.config.recovered_dir)
        self.assertEqual(sorted(p.name for p in recovered.iterdir()), ["a.txt", "b.log"])
        self.assertIn("Recovered: a.txt", output)
        self.assertTrue(self.log.entries[0].endswith(": 2 file(s)"))

    def test_search_and_empty_keyword(self):
        _, output, _ = self.run_menu(
            "5", str(self.evidence), "   ",
            "5", str(self.evidence), "HELLO", "",
            "5", str(self.evidence), "hello", "log",
            "8",
        )
        self.assertIn("Keyword cannot be empty!", output)
        self.assertIn(str((self.evidence / "a.txt").absolute()), output)
        self.assertIn("No matches found.", output)
        self.assertEqual(len(self.log), 2)

    def test_report_and_clear(self):
        _, output, _ = self.run_menu("6", "1", str(self.evidence), "6", "7", "6", "8")
        self.assertIn("No log entries in this session.", output)
        self.assertIn("Report saved at:", output)
        self.assertIn("Session log cleared.", output)
        self.assertEqual(output.count("No log entries in this session."), 2)

        reports = list(Path(self.config.reports_dir).glob("report_*.txt"))
        self.assertEqual(len(reports), 1)
        lines = reports[0].read_text(encoding="utf-8").splitlines()
        self.assertEqual(lines[3], f"1) Scanned directory: {self.evidence.absolute()} (2 entries)")


if __name__ == '__main__':
    unittest.main()
