from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import List, Optional

from ..config import CalendarSettings
from ..core import InMemoryCalendar
from ..domain import (
    BusyStatus,
    EditScope,
    Event,
    EventDraft,
    EventId,
    EventPatch,
    EventSelector,
    SeriesDraft,
    SeriesId,
    ValidationError,
)
from .zones import ZoneLike, resolve_zone, to_zone_local, zone_name

logger = logging.getLogger(__name__)


def _clean_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Calendar name cannot be blank")
    return cleaned


class ZonedCalendar:
    """A named calendar bound to an IANA time zone.

    Event times stored in :attr:`engine` are wall-clock readings in :attr:`zone`.
    Everything else is delegated to the wrapped :class:`InMemoryCalendar`.
    """

    def __init__(
        self,
        name: str,
        zone: Optional[ZoneLike] = None,
        *,
        engine: Optional[InMemoryCalendar] = None,
        settings: Optional[CalendarSettings] = None,
    ) -> None:
        self._engine = engine or InMemoryCalendar(settings)
        self._name = _clean_name(name)
        self._zone = resolve_zone(zone or self._engine.settings.default_timezone)

    def __repr__(self) -> str:
        return f"ZonedCalendar(name={self._name!r}, zone={self.zone_name!r}, events={len(self._engine)})"

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _clean_name(value)

    @property
    def zone(self) -> tzinfo:
        return self._zone

    @zone.setter
    def zone(self, value: ZoneLike) -> None:
        resolved = resolve_zone(value)
        logger.debug("Calendar %s moved from %s to %s", self._name, self.zone_name, zone_name(resolved))
        self._zone = resolved

    @property
    def zone_name(self) -> str:
        return zone_name(self._zone)

    @property
    def engine(self) -> InMemoryCalendar:
        return self._engine

    def to_local(self, dt: datetime, source: ZoneLike) -> datetime:
        """Read the instant ``dt`` (wall clock in ``source``) in this calendar's zone."""

        return to_zone_local(dt, source, self._zone)

    def create(self, draft: EventDraft) -> EventId:
        return self._engine.create(draft)

    def create_series(self, draft: SeriesDraft) -> SeriesId:
        return self._engine.create_series(draft)

    def update_by_selector(
        self,
        selector: EventSelector,
        patch: EventPatch,
        scope: EditScope = EditScope.SINGLE,
    ) -> List[Event]:
        return self._engine.update_by_selector(selector, patch, scope)

    def group_as_series(self, event_ids: List[EventId]) -> SeriesId:
        return self._engine.group_as_series(event_ids)

    def events_on(self, day: date) -> List[Event]:
        return self._engine.events_on(day)

    def events_overlapping(self, start: datetime, end: datetime) -> List[Event]:
        return self._engine.events_overlapping(start, end)

    def status_at(self, instant: datetime) -> BusyStatus:
        return self._engine.status_at(instant)

    def all_events(self) -> List[Event]:
        return self._engine.all_events()

    def get(self, event_id: EventId) -> Event:
        return self._engine.get(event_id)

    def resolve(self, selector: EventSelector) -> Event:
        return self._engine.resolve(selector)

    def series_of(self, event_id: EventId) -> Optional[SeriesId]:
        return self._engine.series_of(event_id)

    def series_events(self, series_id: SeriesId) -> List[Event]:
        return self._engine.series_events(series_id)

    def __len__(self) -> int:
        return len(self._engine)
