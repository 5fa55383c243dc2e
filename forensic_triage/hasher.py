#!/usr/bin/env python3
"""
File Hasher - MD5 / SHA-256 digests over a file's byte stream.
Streams fixed 4 KB chunks so large evidence files never sit in memory.
"""

import hashlib
import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .config import HASH_CHUNK_SIZE
from .errors import InvalidPathError
from .session_log import SessionLog

logger = logging.getLogger(__name__)


class DigestKind(Enum):
    """Supported digest algorithms (value = hashlib name)"""
    MD5 = "md5"
    SHA256 = "sha256"

    @property
    def label(self) -> str:
        return "MD5" if self is DigestKind.MD5 else "SHA-256"

    @property
    def hex_length(self) -> int:
        return 32 if self is DigestKind.MD5 else 64

    @classmethod
    def from_choice(cls, choice: str) -> Tuple["DigestKind", bool]:
        """
        Map menu input to a digest kind.
        "1" -> MD5, "2" -> SHA-256, anything else -> SHA-256 with defaulted=True.
        """
        choice = (choice or "").strip()
        if choice == "1":
            return cls.MD5, False
        if choice == "2":
            return cls.SHA256, False
        return cls.SHA256, True


@dataclass
class HashResult:
    path: str
    kind: DigestKind
    digest: Optional[str]

    @property
    def ok(self) -> bool:
        return self.digest is not None


def compute_digest(path, kind: DigestKind, chunk_size: int = HASH_CHUNK_SIZE) -> Optional[str]:
    """Hex digest of the file at path, or None when it cannot be read"""
    try:
        digest = hashlib.new(kind.value)
        with open(path, "rb") as f:
            while True:
                chunk = f.read(chunk_size)
                if not chunk:
                    break
                digest.update(chunk)
        return digest.hexdigest()
    except (OSError, ValueError) as e:
        logger.warning(f"{kind.label} failed for {path}: {e}")
        return None


class FileHasher:
    """Validates the target, hashes it and records the result"""

    def __init__(self, session_log: SessionLog):
        self.session_log = session_log

    @staticmethod
    def validate(path: str):
        if not os.path.isfile(path):
            raise InvalidPathError("Invalid file path!")

    def hash_file(self, path: str, kind: DigestKind = DigestKind.SHA256) -> HashResult:
        self.validate(path)

        abs_path = os.path.abspath(path)
        digest = compute_digest(abs_path, kind)
        if digest is not None:
            self.session_log.append(f"Hash {kind.label} computed for: {abs_path} => {digest}")
        return HashResult(path=abs_path, kind=kind, digest=digest)
