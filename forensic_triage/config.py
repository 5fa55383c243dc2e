"""
Runtime configuration for Forensic Triage.
Defaults reproduce the classic layout: ./forensic_reports and ./recovered_files
"""

from dataclasses import dataclass

REPORTS_DIR = "forensic_reports"
RECOVERED_DIR = "recovered_files"
LOG_FILE = "triage.log"
LOG_LEVEL = "ERROR"

HASH_CHUNK_SIZE = 4096
MAX_SEARCH_FILE_SIZE = 5 * 1024 * 1024  # 5 MiB


@dataclass(frozen=True)
class TriageConfig:
    """Paths and logging settings for one session"""
    reports_dir: str = REPORTS_DIR
    recovered_dir: str = RECOVERED_DIR
    log_file: str = LOG_FILE
    log_level: str = LOG_LEVEL
