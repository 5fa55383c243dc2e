#!/usr/bin/env python3
"""
Metadata Inspector - size, permissions, timestamps and extension of one entry
"""

import os
import stat
from dataclasses import dataclass
from datetime import datetime

from .errors import NotFoundError
from .session_log import SessionLog

TIMESTAMP_FORMAT = "%d-%m-%Y %H:%M:%S"


def get_extension(name: str) -> str:
    """
    Text after the last dot, case preserved.
    "report.TXT" -> "TXT", "README" -> "", "archive." -> ""
    """
    idx = name.rfind(".")
    if idx == -1 or idx == len(name) - 1:
        return ""
    return name[idx + 1:]


def is_hidden(path: str, st: os.stat_result = None) -> bool:
    """Dot-files everywhere, plus the hidden attribute on Windows"""
    if os.path.basename(path).startswith("."):
        return True
    attrs = getattr(st, "st_file_attributes", 0) if st is not None else 0
    return bool(attrs & getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0))


@dataclass(frozen=True)
class FileMetadataSnapshot:
    """Read-only view of a filesystem entry at inspection time"""
    name: str
    path: str
    size: int
    readable: bool
    writable: bool
    executable: bool
    hidden: bool
    modified: datetime
    extension: str

    @property
    def modified_display(self) -> str:
        return self.modified.strftime(TIMESTAMP_FORMAT)

    @property
    def extension_display(self) -> str:
        return self.extension or "(none)"


class MetadataInspector:
    def __init__(self, session_log: SessionLog):
        self.session_log = session_log

    def inspect(self, path: str) -> FileMetadataSnapshot:
        """Snapshot the entry at path and log the inspection"""
        if not os.path.exists(path):
            raise NotFoundError()

        abs_path = os.path.abspath(path)
        st = os.stat(abs_path)
        name = os.path.basename(abs_path.rstrip(os.sep)) or abs_path

        snapshot = FileMetadataSnapshot(
            name=name,
            path=abs_path,
            size=st.st_size,
            readable=os.access(abs_path, os.R_OK),
            writable=os.access(abs_path, os.W_OK),
            executable=os.access(abs_path, os.X_OK),
            hidden=is_hidden(abs_path, st),
            modified=datetime.fromtimestamp(st.st_mtime),
            extension=get_extension(name),
        )
        self.session_log.append(f"Metadata viewed for: {abs_path}, size={snapshot.size}")
        return snapshot
