"""
Directory Lister - immediate children of one directory (no recursion)
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List

from .errors import InvalidPathError
from .session_log import SessionLog

logger = logging.getLogger(__name__)


@dataclass
class DirectoryListing:
    path: str
    entries: List[str] = field(default_factory=list)
    access_denied: bool = False


class DirectoryLister:
    def __init__(self, session_log: SessionLog):
        self.session_log = session_log

    def list_directory(self, path: str) -> DirectoryListing:
        """
        Names of the entries directly under path, in platform order.
        An unreadable directory gives an empty listing flagged access_denied
        and leaves the session log untouched.
        """
        if not os.path.isdir(path):
            raise InvalidPathError("Invalid directory path!")

        abs_path = os.path.abspath(path)
        try:
            entries = os.listdir(abs_path)
        except OSError as e:
            logger.warning(f"Cannot list {abs_path}: {e}")
            return DirectoryListing(path=abs_path, access_denied=True)

        self.session_log.append(f"Scanned directory: {abs_path} ({len(entries)} entries)")
        return DirectoryListing(path=abs_path, entries=entries)
