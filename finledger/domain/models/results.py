"""Uniform result shapes returned by ledger operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Failure categories surfaced to callers."""

    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    EMPTY_SELECTION = "empty_selection"
    RATE_LIMITED = "rate_limited"
    BLOCKED = "blocked"
    STORE_FAILURE = "store_failure"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a mutating operation.

    Attributes:
        success: Whether the operation committed.
        data: Optional payload (for example the affected account).
        error: Human-readable failure message.
        error_kind: Failure category when ``success`` is False.
    """

    success: bool
    data: Any = None
    error: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def ok(cls, data: Any = None) -> "OperationResult":
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "OperationResult":
        return cls(success=False, error=message, error_kind=kind)


__all__ = ["ErrorKind", "OperationResult"]
