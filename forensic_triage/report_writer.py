#!/usr/bin/env python3
"""
Report Writer - dumps the session log into forensic_reports/report_<millis>.txt
"""

import logging
import time
from datetime import datetime
from pathlib import Path

from .errors import EmptyLogError
from .session_log import SessionLog

logger = logging.getLogger(__name__)

REPORT_HEADER = "===== FORENSIC REPORT ====="


class ReportWriter:
    """Plain-text session report generator"""

    def __init__(self, reports_dir):
        self.reports_dir = Path(reports_dir)

    def _next_report_path(self) -> Path:
        millis = int(time.time() * 1000)
        path = self.reports_dir / f"report_{millis}.txt"
        while path.exists():
            millis += 1
            path = self.reports_dir / f"report_{millis}.txt"
        return path

    def render(self, session_log: SessionLog) -> str:
        lines = [
            REPORT_HEADER,
            f"Generated on: {datetime.now().isoformat()}",
            "",
        ]
        for i, entry in enumerate(session_log, start=1):
            lines.append(f"{i}) {entry}")
        return "\n".join(lines) + "\n"

    def write(self, session_log: SessionLog) -> Path:
        """
        Write the report and return its path.

        Raises EmptyLogError for an empty log and lets OSError through;
        the log itself is never modified.
        """
        if session_log.is_empty():
            raise EmptyLogError()

        content = self.render(session_log)
        try:
            self.reports_dir.mkdir(parents=True, exist_ok=True)
            report_path = self._next_report_path()
            with open(report_path, "x", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Report generation failed in {self.reports_dir}: {e}")
            raise

        return report_path.absolute()
