"""Request objects exchanged with the command, GUI and export layers."""

from __future__ import annotations

from dataclasses import dataclass, fields as dataclass_fields
from datetime import date, datetime, time
from typing import List, Optional

from .enums import EventStatus
from .errors import ValidationError
from .models import Event, RecurrenceRule


@dataclass(slots=True)
class EventDraft:
    subject: str
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    all_day_date: Optional[date] = None
    description: Optional[str] = None
    location: Optional[str] = None
    status: Optional[EventStatus] = None


@dataclass(slots=True)
class SeriesDraft:
    subject: str
    start_date: date
    rule: RecurrenceRule
    all_day: bool = False
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    description: Optional[str] = None
    location: Optional[str] = None
    status: Optional[EventStatus] = None

    def precheck(self) -> None:
        if not self.subject or not self.subject.strip():
            raise ValidationError("Subject is required")
        if self.start_date is None:
            raise ValidationError("start_date is required", subject=self.subject)
        if self.rule is None:
            raise ValidationError("A recurrence rule is required", subject=self.subject)
        if self.all_day:
            return
        if self.start_time is None or self.end_time is None:
            raise ValidationError("Timed series require start_time and end_time", subject=self.subject)
        if self.end_time <= self.start_time:
            raise ValidationError("end_time must be after start_time", subject=self.subject)


@dataclass(frozen=True, slots=True)
class EventSelector:
    subject: str
    start: datetime
    end: Optional[datetime] = None

    def describe(self) -> str:
        if self.end is None:
            return f"{self.subject!r} at {self.start.isoformat()}"
        return f"{self.subject!r} {self.start.isoformat()}-{self.end.isoformat()}"


@dataclass(frozen=True, slots=True)
class EventPatch:
    """Partial update; ``None`` leaves the current value untouched."""

    subject: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    description: Optional[str] = None
    location: Optional[str] = None
    status: Optional[EventStatus] = None

    def fields(self) -> List[str]:
        return [item.name for item in dataclass_fields(self) if getattr(self, item.name) is not None]

    @property
    def is_empty(self) -> bool:
        return not self.fields()

    def changes_start(self, event: Event) -> bool:
        return self.start is not None and self.start != event.start
