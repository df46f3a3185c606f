"""Error kinds raised by the calendar engine.

Every error carries an explicit :class:`ErrorKind` plus the offending subject
(when there is one) so callers can render messages without parsing text.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


class CalendarError(Exception):
    """Raised for any rejected calendar operation; inspect ``kind`` to dispatch."""

    kind: ErrorKind

    def __init__(self, message: str, *, subject: Optional[str] = None, detail: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.subject = subject
        self.detail = detail

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "subject": self.subject,
            "detail": self.detail,
        }


class ValidationError(CalendarError, ValueError):
    """Malformed or logically inconsistent input."""

    kind = ErrorKind.VALIDATION


class AmbiguousSelectionError(ValidationError):
    """A selector without an end time matched more than one event."""

    def __init__(self, message: str, *, subject: Optional[str] = None, candidates: int = 0) -> None:
        super().__init__(message, subject=subject, detail=f"{candidates} candidates")
        self.candidates = candidates


class ConflictError(CalendarError):
    """The operation would leave two live events with the same subject/start/end."""

    kind = ErrorKind.CONFLICT

    def __init__(
        self,
        message: str,
        *,
        subject: Optional[str] = None,
        key: Optional[str] = None,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message, subject=subject, detail=detail)
        self.key = key


class NotFoundError(CalendarError, LookupError):
    """A selector or identifier did not resolve to a live entity."""

    kind = ErrorKind.NOT_FOUND


__all__ = [
    "AmbiguousSelectionError",
    "CalendarError",
    "ConflictError",
    "ErrorKind",
    "NotFoundError",
    "ValidationError",
]
