from __future__ import annotations

from datetime import date, datetime, time
from typing import List, Optional, cast

from pydantic import BaseModel, ConfigDict, Field

from ..domain import (
    CalendarError,
    Event,
    EventDraft,
    EventPatch,
    EventSelector,
    EventStatus,
    RecurrenceRule,
    SeriesDraft,
    ValidationError,
    Weekday,
)
from ..domain.models import coerce_status
from ..services import CopyFailure, CopyReport


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    subject: str
    start: str
    end: str
    description: str = Field(default="")
    location: str = Field(default="")
    status: str
    series_id: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(cls, event: Event, *, series_id: Optional[object] = None) -> "EventPayload":
        return cls(
            id=str(event.id),
            subject=event.subject,
            start=event.start.isoformat(),
            end=event.end.isoformat(),
            description=event.description,
            location=event.location,
            status=event.status.value,
            series_id=str(series_id) if series_id is not None else None,
        )


class EventDraftPayload(BaseModel):
    subject: str
    start: Optional[str] = Field(default=None)
    end: Optional[str] = Field(default=None)
    all_day_date: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    location: Optional[str] = Field(default=None)
    status: Optional[str] = Field(default=None)

    def to_domain(self) -> EventDraft:
        return EventDraft(
            subject=self.subject,
            start=_parse_datetime(self.start, "start"),
            end=_parse_datetime(self.end, "end"),
            all_day_date=_parse_date(self.all_day_date, "all_day_date"),
            description=self.description,
            location=self.location,
            status=_parse_status(self.status),
        )


class SeriesDraftPayload(BaseModel):
    """Recurring block; ``weekdays`` uses the letter codes ``MTWRFSU``."""

    subject: str
    start_date: str
    weekdays: str
    count: Optional[int] = Field(default=None)
    until: Optional[str] = Field(default=None)
    all_day: bool = Field(default=False)
    start_time: Optional[str] = Field(default=None)
    end_time: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    location: Optional[str] = Field(default=None)
    status: Optional[str] = Field(default=None)

    def to_domain(self) -> SeriesDraft:
        rule = RecurrenceRule(
            weekdays=Weekday.parse(self.weekdays),
            count=self.count,
            until=_parse_date(self.until, "until"),
        )
        return SeriesDraft(
            subject=self.subject,
            start_date=cast(date, _parse_date(self.start_date, "start_date")),
            rule=rule,
            all_day=self.all_day,
            start_time=_parse_time(self.start_time, "start_time"),
            end_time=_parse_time(self.end_time, "end_time"),
            description=self.description,
            location=self.location,
            status=_parse_status(self.status),
        )


class EventSelectorPayload(BaseModel):
    subject: str
    start: str
    end: Optional[str] = Field(default=None)

    def to_domain(self) -> EventSelector:
        return EventSelector(
            subject=self.subject,
            start=cast(datetime, _parse_datetime(self.start, "start")),
            end=_parse_datetime(self.end, "end"),
        )


class EventPatchPayload(BaseModel):
    subject: Optional[str] = Field(default=None)
    start: Optional[str] = Field(default=None)
    end: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    location: Optional[str] = Field(default=None)
    status: Optional[str] = Field(default=None)

    def to_domain(self) -> EventPatch:
        return EventPatch(
            subject=self.subject,
            start=_parse_datetime(self.start, "start"),
            end=_parse_datetime(self.end, "end"),
            description=self.description,
            location=self.location,
            status=_parse_status(self.status),
        )


class CopyFailurePayload(BaseModel):
    subject: str
    start: str
    reason: str

    @classmethod
    def from_domain(cls, failure: CopyFailure) -> "CopyFailurePayload":
        return cls(subject=failure.subject, start=failure.start.isoformat(), reason=failure.reason)


class CopyReportPayload(BaseModel):
    ok: bool
    copied: List[str] = Field(default_factory=list)
    series: List[str] = Field(default_factory=list)
    failures: List[CopyFailurePayload] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, report: CopyReport) -> "CopyReportPayload":
        return cls(
            ok=report.ok,
            copied=[str(event_id) for event_id in report.copied],
            series=[str(series_id) for series_id in report.series],
            failures=[CopyFailurePayload.from_domain(failure) for failure in report.failures],
        )


class ErrorPayload(BaseModel):
    kind: str
    message: str
    subject: Optional[str] = Field(default=None)
    detail: Optional[str] = Field(default=None)

    @classmethod
    def from_error(cls, error: CalendarError) -> "ErrorPayload":
        return cls(**error.to_dict())


def _parse_datetime(value: Optional[str], name: str) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise ValidationError(f"{name} is not an ISO date-time: {value!r}") from exc


def _parse_date(value: Optional[str], name: str) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise ValidationError(f"{name} is not an ISO date: {value!r}") from exc


def _parse_time(value: Optional[str], name: str) -> Optional[time]:
    if value is None:
        return None
    try:
        return time.fromisoformat(value.strip())
    except ValueError as exc:
        raise ValidationError(f"{name} is not an ISO time: {value!r}") from exc


def _parse_status(value: Optional[str]) -> Optional[EventStatus]:
    if value is None:
        return None
    return coerce_status(value.strip().lower())
