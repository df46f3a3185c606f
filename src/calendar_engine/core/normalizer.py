from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple

from ..config import CalendarSettings
from ..domain import EventDraft, EventStatus, ValidationError
from ..domain.models import coerce_status, require_naive


@dataclass(frozen=True, slots=True)
class Normalizer:
    """Applies the configured all-day window and default status to drafts."""

    settings: CalendarSettings

    def all_day_window(self, day: date) -> Tuple[datetime, datetime]:
        return (
            datetime.combine(day, self.settings.all_day_start),
            datetime.combine(day, self.settings.all_day_end),
        )

    def normalize_times(self, draft: EventDraft) -> Tuple[datetime, datetime]:
        if draft.all_day_date is not None:
            return self.all_day_window(draft.all_day_date)
        if draft.start is None:
            raise ValidationError("start is required", subject=draft.subject)
        start = require_naive(draft.start, "start")
        if draft.end is None:
            return self.all_day_window(start.date())
        return start, require_naive(draft.end, "end")

    def resolve_status(self, status: Optional[EventStatus]) -> EventStatus:
        if status is None:
            return self.settings.default_status
        return coerce_status(status)
