"""In-memory calendar engine with recurring series and zone-aware copies."""

from __future__ import annotations

from .config import CalendarSettings, get_settings
from .core import InMemoryCalendar
from .domain import (
    AmbiguousSelectionError,
    BusyStatus,
    CalendarError,
    ConflictError,
    EditScope,
    Event,
    EventDraft,
    EventId,
    EventPatch,
    EventSelector,
    EventStatus,
    NotFoundError,
    RecurrenceRule,
    SeriesDraft,
    SeriesId,
    ValidationError,
    Weekday,
)
from .logging import configure_logging
from .services import CopyReport, EventCopier, ZonedCalendar

__all__ = [
    "AmbiguousSelectionError",
    "BusyStatus",
    "CalendarError",
    "CalendarSettings",
    "ConflictError",
    "CopyReport",
    "EditScope",
    "Event",
    "EventCopier",
    "EventDraft",
    "EventId",
    "EventPatch",
    "EventSelector",
    "EventStatus",
    "InMemoryCalendar",
    "NotFoundError",
    "RecurrenceRule",
    "SeriesDraft",
    "SeriesId",
    "ValidationError",
    "Weekday",
    "ZonedCalendar",
    "configure_logging",
    "get_settings",
]
