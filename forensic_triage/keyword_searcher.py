#!/usr/bin/env python3
"""
Keyword Searcher - recursive, case-insensitive substring search over text files.

Walk order is depth-first in directory enumeration order. Each file is read
line by line and abandoned at the first matching line. Files above
MAX_SEARCH_FILE_SIZE are never opened.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Set, Tuple

from .config import MAX_SEARCH_FILE_SIZE
from .errors import EmptyKeywordError, InvalidPathError
from .metadata_inspector import get_extension
from .session_log import SessionLog

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    root: str
    keyword: str
    extension: str = ""
    hits: List[str] = field(default_factory=list)


def normalize_extension(extension: str) -> str:
    """'  .TXT ' -> 'txt'; empty means no filter"""
    ext = (extension or "").strip().lower()
    if ext.startswith("."):
        ext = ext[1:]
    return ext


def file_contains(path: str, keyword_lower: str) -> bool:
    """True at the first line containing keyword_lower; read errors count as no match"""
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                if keyword_lower in line.lower():
                    return True
    except OSError as e:
        logger.warning(f"Skipping unreadable file {path}: {e}")
    return False


class KeywordSearcher:
    def __init__(self, session_log: SessionLog, max_file_size: int = MAX_SEARCH_FILE_SIZE):
        self.session_log = session_log
        self.max_file_size = max_file_size

    @staticmethod
    def validate_root(root: str):
        if not os.path.isdir(root):
            raise InvalidPathError("Invalid directory!")

    @staticmethod
    def validate_keyword(keyword: str) -> str:
        """Trimmed keyword; blank input raises EmptyKeywordError"""
        keyword = (keyword or "").strip()
        if not keyword:
            raise EmptyKeywordError()
        return keyword

    def search(self, root: str, keyword: str, extension: str = "") -> SearchResult:
        """
        Collect absolute paths of files under root whose text contains keyword.

        Both the root and the keyword are validated before any traversal.
        """
        self.validate_root(root)
        keyword = self.validate_keyword(keyword)

        abs_root = os.path.abspath(root)
        result = SearchResult(root=abs_root, keyword=keyword,
                              extension=normalize_extension(extension))
        visited: Set[Tuple[int, int]] = set()
        self._walk(abs_root, keyword.lower(), result.extension, result.hits, visited)

        self.session_log.append(
            f"Keyword search: '{keyword}' under {abs_root} -> {len(result.hits)} match(es)"
        )
        return result

    def _walk(self, current: str, keyword_lower: str, ext: str,
              hits: List[str], visited: Set[Tuple[int, int]]):
        try:
            st = os.stat(current)
        except OSError:
            return
        # symlinked directories can loop back on themselves
        identity = (st.st_dev, st.st_ino)
        if identity in visited:
            return
        visited.add(identity)

        try:
            with os.scandir(current) as it:
                entries = list(it)
        except OSError as e:
            logger.warning(f"Cannot list {current}: {e}")
            return

        for entry in entries:
            try:
                is_dir = entry.is_dir()
                is_file = not is_dir and entry.is_file()
            except OSError:
                continue

            if is_dir:
                self._walk(entry.path, keyword_lower, ext, hits, visited)
                continue
            if not is_file:
                continue

            if ext and get_extension(entry.name).lower() != ext:
                continue
            try:
                size = entry.stat().st_size
            except OSError:
                continue
            if size > self.max_file_size:
                continue

            if file_contains(entry.path, keyword_lower):
                hits.append(os.path.abspath(entry.path))
