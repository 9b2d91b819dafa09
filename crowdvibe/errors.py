# Error kinds shared by validators, entities, crud and routers

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of failure kinds. ARGUMENT: malformed/missing, RANGE: out of bounds, STORAGE: DB/hydration."""

    ARGUMENT = "ARGUMENT"
    RANGE = "RANGE"
    STORAGE = "STORAGE"


class CrowdVibeError(Exception):
    """Base error. status_code is always set so the API reply never loses its status."""

    kind: ErrorKind = ErrorKind.ARGUMENT
    default_status_code: int = 400

    def __init__(self, message: str, status_code: Optional[int] = None, field: Optional[str] = None):
        self.message = message
        self.status_code = status_code if status_code is not None else self.default_status_code
        self.field = field
        super().__init__(message)


class ArgumentError(CrowdVibeError):
    """Missing, empty or unparseable value."""

    kind = ErrorKind.ARGUMENT
    default_status_code = 400


class OutOfRangeError(CrowdVibeError):
    """Value outside its numeric bound or over its maximum length."""

    kind = ErrorKind.RANGE
    default_status_code = 400


class StorageError(CrowdVibeError):
    """Statement execution failed, or a stored row could not be turned back into an entity."""

    kind = ErrorKind.STORAGE
    default_status_code = 500
