#!/usr/bin/env python3
"""
Forensic Triage v1.0
Interactive file triage console:
  - Directory listing & file metadata
  - MD5 / SHA-256 hashing
  - Recovery copy from a source folder
  - Recursive keyword search
  - Plain-text session reports
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape

from forensic_triage.config import LOG_FILE, LOG_LEVEL, RECOVERED_DIR, REPORTS_DIR, TriageConfig
from forensic_triage.console_ui import TriageUI
from forensic_triage.directory_structure import WorkspaceLayout
from forensic_triage.menu_controller import MenuController

console = Console(highlight=False)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Forensic Triage - interactive file triage console"
    )
    parser.add_argument("--reports-dir", default=REPORTS_DIR,
                        help="Folder for generated session reports")
    parser.add_argument("--recovered-dir", default=RECOVERED_DIR,
                        help="Default destination for recovered files")
    parser.add_argument("--log-file", default=LOG_FILE,
                        help="Diagnostic log file")
    parser.add_argument("--log-level", default=LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Diagnostic log level")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = TriageConfig(
        reports_dir=args.reports_dir,
        recovered_dir=args.recovered_dir,
        log_file=args.log_file,
        log_level=args.log_level,
    )

    logging.basicConfig(
        filename=config.log_file,
        level=getattr(logging, config.log_level),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    try:
        WorkspaceLayout(config).create_structure()
    except OSError as e:
        logging.error(f"Cannot create working folders: {e}")
        console.print(f"[yellow]Cannot create working folders: {escape(str(e))}[/yellow]")

    controller = MenuController(config, ui=TriageUI(console))
    return controller.run()


if __name__ == "__main__":
    sys.exit(main())
