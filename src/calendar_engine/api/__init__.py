"""Pydantic payloads exchanged with command, GUI and export layers."""

from __future__ import annotations

from .models import (
    CopyFailurePayload,
    CopyReportPayload,
    ErrorPayload,
    EventDraftPayload,
    EventPatchPayload,
    EventPayload,
    EventSelectorPayload,
    SeriesDraftPayload,
)
from .serializers import (
    dump_events_json,
    serialize_copy_report,
    serialize_error,
    serialize_event,
    serialize_events,
)

__all__ = [
    "CopyFailurePayload",
    "CopyReportPayload",
    "ErrorPayload",
    "EventDraftPayload",
    "EventPatchPayload",
    "EventPayload",
    "EventSelectorPayload",
    "SeriesDraftPayload",
    "dump_events_json",
    "serialize_copy_report",
    "serialize_error",
    "serialize_event",
    "serialize_events",
]
