#!/usr/bin/env python3
"""
Session Log - in-memory record of the actions taken in one run.
Entries are plain strings; their order is the report numbering.
"""

import logging
from typing import Iterator, Tuple

logger = logging.getLogger(__name__)


class SessionLog:
    """Append-only event sequence owned by the session"""

    def __init__(self):
        self._entries = []

    def append(self, entry: str):
        self._entries.append(str(entry))
        logger.info(entry)

    def clear(self):
        """Drop every entry (explicit 'clear log' command)"""
        logger.info(f"Session log cleared ({len(self._entries)} entries dropped)")
        self._entries.clear()

    @property
    def entries(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))
