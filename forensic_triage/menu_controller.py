#!/usr/bin/env python3
"""
Menu Controller - the interactive loop.

One state (awaiting command), one transition per menu item. Every operation
error is turned into a message here; only EXIT leaves the loop.
"""

import logging
from enum import IntEnum
from typing import Callable, Dict, Optional

from .config import TriageConfig
from .console_ui import TriageUI
from .directory_lister import DirectoryLister
from .errors import EmptyLogError, TriageError
from .hasher import DigestKind, FileHasher
from .keyword_searcher import KeywordSearcher
from .metadata_inspector import MetadataInspector
from .recovery_copier import RecoveryCopier
from .report_writer import ReportWriter
from .session_log import SessionLog

logger = logging.getLogger(__name__)


class Command(IntEnum):
    SCAN_DIRECTORY = 1
    VIEW_METADATA = 2
    HASH_FILE = 3
    RECOVER_FILES = 4
    SEARCH_KEYWORD = 5
    GENERATE_REPORT = 6
    CLEAR_LOG = 7
    EXIT = 8

    @classmethod
    def parse(cls, raw: str) -> Optional["Command"]:
        """Menu number -> Command, None for anything else"""
        try:
            return cls(int((raw or "").strip()))
        except ValueError:
            return None


class MenuController:
    def __init__(self, config: TriageConfig, session_log: Optional[SessionLog] = None,
                 ui: Optional[TriageUI] = None,
                 read_line: Optional[Callable[[str], str]] = None):
        self.config = config
        self.session_log = session_log if session_log is not None else SessionLog()
        self.ui = ui or TriageUI()
        self.read_line = read_line or self.ui.read_line

        self.lister = DirectoryLister(self.session_log)
        self.inspector = MetadataInspector(self.session_log)
        self.hasher = FileHasher(self.session_log)
        self.copier = RecoveryCopier(self.session_log, config.recovered_dir)
        self.searcher = KeywordSearcher(self.session_log)
        self.report_writer = ReportWriter(config.reports_dir)

        self.handlers: Dict[Command, Callable[[], None]] = {
            Command.SCAN_DIRECTORY: self.scan_directory,
            Command.VIEW_METADATA: self.view_metadata,
            Command.HASH_FILE: self.generate_hash,
            Command.RECOVER_FILES: self.recover_files,
            Command.SEARCH_KEYWORD: self.search_keywords,
            Command.GENERATE_REPORT: self.generate_report,
            Command.CLEAR_LOG: self.clear_log,
        }

    def _ask(self, prompt: str) -> str:
        return self.read_line(prompt).strip()

    def run(self) -> int:
        """Loop until EXIT (or end of input). Returns the process exit code."""
        while True:
            self.ui.render_menu()
            try:
                command = Command.parse(self.read_line("Enter choice: "))
                if command is Command.EXIT:
                    break
                if command is None:
                    self.ui.warn("Invalid choice. Try again.")
                    continue
                self.dispatch(command)
            except (EOFError, KeyboardInterrupt):
                self.ui.info("")
                break

        self.ui.info("Exiting... Goodbye!")
        return 0

    def dispatch(self, command: Command):
        handler = self.handlers[command]
        try:
            handler()
        except TriageError as e:
            self.ui.error(str(e))
        except OSError as e:
            logger.error(f"{command.name} failed: {e}", exc_info=True)
            self.ui.error(f"Operation failed: {e}")

    # --- handlers -----------------------------------------------------------

    def scan_directory(self):
        path = self._ask("Enter directory path to scan: ")
        listing = self.lister.list_directory(path)
        if listing.access_denied:
            self.ui.warn("No files found or access denied.")
            return
        self.ui.show_listing(listing)

    def view_metadata(self):
        path = self._ask("Enter file path: ")
        self.ui.show_metadata(self.inspector.inspect(path))

    def generate_hash(self):
        path = self._ask("Enter file path: ")
        self.hasher.validate(path)
        self.ui.info("Choose algorithm: 1) MD5  2) SHA-256")
        kind, defaulted = DigestKind.from_choice(self._ask("Enter choice: "))
        if defaulted:
            self.ui.warn("Invalid choice. Defaulting to SHA-256.")

        result = self.hasher.hash_file(path, kind)
        if result.ok:
            self.ui.show_hash(result)
        else:
            self.ui.error("Failed to compute hash.")

    def recover_files(self):
        source = self._ask("Enter source folder (simulate deleted files folder): ")
        self.copier.validate_source(source)
        destination = self._ask(
            f"Enter destination folder (or press Enter for '{self.config.recovered_dir}'): "
        )

        result = self.copier.recover(source, destination, on_progress=self.ui.show_recovery_progress)
        if result.access_denied:
            self.ui.warn("No files to recover or access denied.")
            return
        self.ui.show_recovery(result)

    def search_keywords(self):
        root = self._ask("Enter root directory to search: ")
        self.searcher.validate_root(root)
        keyword = self.searcher.validate_keyword(self._ask("Enter keyword (case-insensitive): "))
        extension = self._ask("Limit by extension (e.g., txt) or press Enter for all: ")

        self.ui.show_hits(self.searcher.search(root, keyword, extension))

    def generate_report(self):
        try:
            report_path = self.report_writer.write(self.session_log)
        except EmptyLogError as e:
            self.ui.warn(str(e))
            return
        except OSError as e:
            self.ui.error(f"Error generating report: {e}")
            return
        self.ui.success(f"Report saved at: {report_path}")

    def clear_log(self):
        self.session_log.clear()
        self.ui.info("Session log cleared.")
