from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import FrozenSet, Iterable, Optional
from uuid import UUID, uuid4

from .enums import EventStatus, Weekday
from .errors import ValidationError


def require_naive(value: datetime, name: str) -> datetime:
    if not isinstance(value, datetime):
        raise ValidationError(f"{name} must be a datetime, got {type(value).__name__}")
    if value.tzinfo is not None:
        raise ValidationError(f"{name} must be a naive wall-clock datetime")
    return value


def _coerce_weekday(value: Weekday | str) -> Weekday:
    if isinstance(value, Weekday):
        return value
    if isinstance(value, str):
        return Weekday.from_code(value)
    raise ValidationError(f"Weekday must be a Weekday or a letter code, got {type(value).__name__}")


def coerce_status(value: EventStatus | str) -> EventStatus:
    try:
        return EventStatus(value)
    except ValueError as exc:
        raise ValidationError(f"Unknown status: {value!r}") from exc


@dataclass(frozen=True, slots=True)
class EventId:
    value: UUID

    @classmethod
    def new(cls) -> "EventId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class SeriesId:
    value: UUID

    @classmethod
    def new(cls) -> "SeriesId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class RecurrenceRule:
    """Weekday set plus exactly one of an occurrence count or an inclusive end date."""

    weekdays: FrozenSet[Weekday]
    count: Optional[int] = None
    until: Optional[date] = None

    def __post_init__(self) -> None:
        weekdays = frozenset(_coerce_weekday(weekday) for weekday in self.weekdays)
        object.__setattr__(self, "weekdays", weekdays)
        if not weekdays:
            raise ValidationError("At least one weekday is required")
        if (self.count is None) == (self.until is None):
            raise ValidationError("Specify exactly one of count or until")
        if self.count is not None:
            if not isinstance(self.count, int) or isinstance(self.count, bool):
                raise ValidationError(f"count must be an integer, got {type(self.count).__name__}")
            if self.count <= 0:
                raise ValidationError("count must be positive")
        if self.until is not None and not isinstance(self.until, date):
            raise ValidationError(f"until must be a date, got {type(self.until).__name__}")

    @classmethod
    def for_count(cls, weekdays: Iterable[Weekday], count: int) -> "RecurrenceRule":
        return cls(weekdays=frozenset(weekdays), count=count)

    @classmethod
    def until_date(cls, weekdays: Iterable[Weekday], until: date) -> "RecurrenceRule":
        return cls(weekdays=frozenset(weekdays), until=until)


@dataclass(frozen=True, slots=True, eq=False)
class Event:
    """Immutable calendar entry; identity is the ``id`` alone.

    Times are naive wall-clock readings in the owning calendar's zone. Use
    :func:`dataclasses.replace` to derive an edited copy: validation runs again
    and the identifier is carried over.
    """

    subject: str
    start: datetime
    end: datetime
    description: str = ""
    location: str = ""
    status: EventStatus = EventStatus.PUBLIC
    id: EventId = field(default_factory=EventId.new)

    def __post_init__(self) -> None:
        subject = (self.subject or "").strip()
        if not subject:
            raise ValidationError("Subject is required")
        object.__setattr__(self, "subject", subject)
        require_naive(self.start, "start")
        require_naive(self.end, "end")
        if self.end <= self.start:
            raise ValidationError("End must be after start", subject=subject)
        object.__setattr__(self, "description", self.description or "")
        object.__setattr__(self, "location", self.location or "")
        object.__setattr__(self, "status", coerce_status(self.status))

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def overlaps(self, start: datetime, end: datetime) -> bool:
        return self.start < end and self.end > start

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
