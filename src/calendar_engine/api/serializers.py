from __future__ import annotations

from typing import Any, Dict, Iterable, List

import orjson

from ..domain import CalendarError, Event
from ..services import CopyReport
from .models import CopyReportPayload, ErrorPayload, EventPayload


def serialize_event(event: Event) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump()


def serialize_events(events: Iterable[Event]) -> List[Dict[str, Any]]:
    return [serialize_event(event) for event in events]


def serialize_copy_report(report: CopyReport) -> Dict[str, Any]:
    return CopyReportPayload.from_domain(report).model_dump()


def serialize_error(error: CalendarError) -> Dict[str, Any]:
    return ErrorPayload.from_error(error).model_dump()


def dump_events_json(events: Iterable[Event]) -> bytes:
    return orjson.dumps(serialize_events(events), option=orjson.OPT_INDENT_2)
