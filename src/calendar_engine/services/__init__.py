"""Services layered over the engine: zoned calendars and cross-calendar copies."""

from __future__ import annotations

from .copier import CopyFailure, CopyReport, EventCopier
from .zoned import ZonedCalendar
from .zones import convert, localize, resolve_zone, to_zone_local

__all__ = [
    "CopyFailure",
    "CopyReport",
    "EventCopier",
    "ZonedCalendar",
    "convert",
    "localize",
    "resolve_zone",
    "to_zone_local",
]
