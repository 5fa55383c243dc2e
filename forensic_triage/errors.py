"""
Error kinds raised by the triage components.
Every one of them is caught by the menu and shown as a message.
"""

from typing import Optional


class TriageError(Exception):
    """Base class for user-facing triage failures"""

    message = "Operation failed."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class InvalidPathError(TriageError):
    """Path is missing or is the wrong kind of entry"""
    message = "Invalid path!"


class NotFoundError(TriageError):
    """Metadata target does not exist"""
    message = "File does not exist!"


class EmptyKeywordError(TriageError):
    message = "Keyword cannot be empty!"


class EmptyLogError(TriageError):
    message = "No log entries in this session. Perform some actions first."
