#!/usr/bin/env python3
"""
Recovery Copier - copies every regular file out of a source folder.
"Recovery" here is a plain copy: no carving, no write-blocking.
Subfolders are skipped, existing files in the destination are overwritten.
"""

import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .errors import InvalidPathError
from .session_log import SessionLog

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, Optional[str]], None]


def copy_exact(item: Path, target: Path):
    """
    Copy item to exactly target (never into it), overwriting a file there.
    A directory in the way raises OSError; copying a file onto itself is a no-op.
    """
    if target.exists() and os.path.samefile(item, target):
        return
    shutil.copyfile(item, target)
    shutil.copystat(item, target)


@dataclass
class RecoveryResult:
    source: str
    destination: str
    recovered: List[str] = field(default_factory=list)
    failures: List[Tuple[str, str]] = field(default_factory=list)
    access_denied: bool = False

    @property
    def recovered_count(self) -> int:
        return len(self.recovered)


class RecoveryCopier:
    """Best-effort bulk copy with per-file failure isolation"""

    def __init__(self, session_log: SessionLog, default_destination: str):
        self.session_log = session_log
        self.default_destination = default_destination

    @staticmethod
    def validate_source(source: str):
        if not os.path.isdir(source):
            raise InvalidPathError("Invalid source folder!")

    def recover(self, source: str, destination: Optional[str] = None,
                on_progress: Optional[ProgressCallback] = None) -> RecoveryResult:
        """
        Copy the regular files directly under source into destination.

        on_progress(name, error) fires once per file; error is None on success.
        The session log gets one entry counting successful copies only.
        """
        self.validate_source(source)

        destination = (destination or "").strip() or self.default_destination
        src = Path(source).absolute()
        dest = Path(destination).absolute()
        dest.mkdir(parents=True, exist_ok=True)

        result = RecoveryResult(source=str(src), destination=str(dest))
        try:
            children = os.listdir(src)
        except OSError as e:
            logger.warning(f"Cannot list recovery source {src}: {e}")
            result.access_denied = True
            return result

        for name in children:
            item = src / name
            if not item.is_file():
                continue
            try:
                copy_exact(item, dest / name)
            except OSError as e:
                logger.warning(f"Recovery copy failed for {item}: {e}")
                result.failures.append((name, str(e)))
                if on_progress:
                    on_progress(name, str(e))
                continue
            result.recovered.append(name)
            if on_progress:
                on_progress(name, None)

        self.session_log.append(
            f"Recovered files from {result.source} to {result.destination}: "
            f"{result.recovered_count} file(s)"
        )
        return result
