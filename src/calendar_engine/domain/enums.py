from __future__ import annotations

from datetime import date
from enum import Enum
from typing import FrozenSet

from .errors import ValidationError


class EventStatus(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class BusyStatus(str, Enum):
    BUSY = "busy"
    AVAILABLE = "available"


class EditScope(str, Enum):
    SINGLE = "single"
    FOLLOWING = "following"
    ENTIRE_SERIES = "entire_series"


class Weekday(str, Enum):
    """Weekdays keyed by their single-letter recurrence codes."""

    MONDAY = "M"
    TUESDAY = "T"
    WEDNESDAY = "W"
    THURSDAY = "R"
    FRIDAY = "F"
    SATURDAY = "S"
    SUNDAY = "U"

    @property
    def python_weekday(self) -> int:
        """Index compatible with :meth:`datetime.date.weekday` (Monday is 0)."""
        return _ORDER.index(self)

    @classmethod
    def from_code(cls, code: str) -> "Weekday":
        try:
            return cls(code.strip().upper())
        except ValueError as exc:
            raise ValidationError(f"Unknown weekday code: {code!r}") from exc

    @classmethod
    def parse(cls, codes: str) -> FrozenSet["Weekday"]:
        """Parse a compact code string such as ``"MWF"`` into a weekday set."""
        cleaned = codes.strip()
        if not cleaned:
            raise ValidationError("At least one weekday code is required")
        return frozenset(cls.from_code(code) for code in cleaned)

    @classmethod
    def from_date(cls, value: date) -> "Weekday":
        return _ORDER[value.weekday()]


_ORDER = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
    Weekday.SUNDAY,
)
