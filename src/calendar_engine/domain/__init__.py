"""Domain values, requests and errors for the calendar engine."""

from __future__ import annotations

from .enums import BusyStatus, EditScope, EventStatus, Weekday
from .errors import (
    AmbiguousSelectionError,
    CalendarError,
    ConflictError,
    ErrorKind,
    NotFoundError,
    ValidationError,
)
from .models import Event, EventId, RecurrenceRule, SeriesId
from .requests import EventDraft, EventPatch, EventSelector, SeriesDraft

__all__ = [
    "AmbiguousSelectionError",
    "BusyStatus",
    "CalendarError",
    "ConflictError",
    "EditScope",
    "ErrorKind",
    "Event",
    "EventDraft",
    "EventId",
    "EventPatch",
    "EventSelector",
    "EventStatus",
    "NotFoundError",
    "RecurrenceRule",
    "SeriesDraft",
    "SeriesId",
    "ValidationError",
    "Weekday",
]
