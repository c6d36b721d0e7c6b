"""Error kinds raised by the dispatch core.

Every failure carries an :class:`ErrorKind` so callers at the edge (CLI,
HTTP service) can branch on the kind instead of the concrete class.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    INVALID_OPERATION = "invalid_operation"
    NOT_FOUND = "not_found"


class ElevatorError(Exception):
    """Base class for all dispatch core failures."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(ElevatorError, ValueError):
    """Malformed or out-of-range input."""

    kind = ErrorKind.INVALID_ARGUMENT


class InvalidOperationError(ElevatorError, RuntimeError):
    """Valid input that is illegal in the current state."""

    kind = ErrorKind.INVALID_OPERATION


class NotFoundError(ElevatorError, LookupError):
    """Lookup miss by id."""

    kind = ErrorKind.NOT_FOUND
