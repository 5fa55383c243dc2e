"""
Forensic Triage - Source Package
Listing, metadata, hashing, recovery copy, keyword search and session reports.
"""

from .config import TriageConfig
from .console_ui import TriageUI
from .directory_lister import DirectoryLister, DirectoryListing
from .directory_structure import WorkspaceLayout
from .errors import (
    EmptyKeywordError,
    EmptyLogError,
    InvalidPathError,
    NotFoundError,
    TriageError,
)
from .hasher import DigestKind, FileHasher, HashResult, compute_digest
from .keyword_searcher import KeywordSearcher, SearchResult
from .menu_controller import Command, MenuController
from .metadata_inspector import FileMetadataSnapshot, MetadataInspector, get_extension
from .recovery_copier import RecoveryCopier, RecoveryResult
from .report_writer import ReportWriter
from .session_log import SessionLog

__version__ = "1.0.0"

__all__ = [
    "TriageConfig",
    "TriageUI",
    "DirectoryLister",
    "DirectoryListing",
    "WorkspaceLayout",
    "TriageError",
    "InvalidPathError",
    "NotFoundError",
    "EmptyKeywordError",
    "EmptyLogError",
    "DigestKind",
    "FileHasher",
    "HashResult",
    "compute_digest",
    "KeywordSearcher",
    "SearchResult",
    "Command",
    "MenuController",
    "FileMetadataSnapshot",
    "MetadataInspector",
    "get_extension",
    "RecoveryCopier",
    "RecoveryResult",
    "ReportWriter",
    "SessionLog",
]
