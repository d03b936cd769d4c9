"""
Domain Exceptions

Every failure surfaced by the record sync applications is one of these.
"""

from typing import Optional


class RecordSyncError(Exception):
    """Base class for all record sync failures."""
    pass


class ValidationError(RecordSyncError, ValueError):
    """Raised when an entity is constructed from invalid field values."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class RequestError(RecordSyncError):
    """Raised when a call to an HTTP API, database or object store fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SerializationError(RecordSyncError):
    """Raised when a payload is not valid JSON or has the wrong shape."""
    pass
