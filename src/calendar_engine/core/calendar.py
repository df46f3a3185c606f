from __future__ import annotations

import logging
import threading
from datetime import date, datetime, time, timedelta
from typing import Dict, Iterable, List, Optional, cast

from ..config import CalendarSettings
from ..data import SeriesIndex, UniquenessIndex
from ..domain import (
    BusyStatus,
    EditScope,
    Event,
    EventDraft,
    EventId,
    EventPatch,
    EventSelector,
    EventStatus,
    NotFoundError,
    SeriesDraft,
    SeriesId,
    ValidationError,
)
from ..domain.models import require_naive
from .normalizer import Normalizer
from .patching import PatchApplier
from .recurrence import RecurrenceExpander
from .selector import SelectorResolver

logger = logging.getLogger(__name__)


def _chronological(events: Iterable[Event]) -> List[Event]:
    return sorted(events, key=lambda event: (event.start, event.end, event.subject.lower()))


class InMemoryCalendar:
    """Single-calendar event store with recurrence series and scoped edits.

    The event table, the uniqueness index and the series index are only ever
    changed together, under one re-entrant lock per instance. Every public
    method either completes or raises without leaving partial changes.
    """

    def __init__(self, settings: Optional[CalendarSettings] = None) -> None:
        self._settings = settings or CalendarSettings.defaults()
        self._lock = threading.RLock()
        self._events: Dict[EventId, Event] = {}
        self._keys = UniquenessIndex()
        self._series = SeriesIndex()
        self._normalizer = Normalizer(self._settings)
        self._expander = RecurrenceExpander()
        self._patcher = PatchApplier(self._events, self._keys)

    @property
    def settings(self) -> CalendarSettings:
        return self._settings

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------
    def create(self, draft: EventDraft) -> EventId:
        with self._lock:
            start, end = self._normalizer.normalize_times(draft)
            event = Event(
                subject=draft.subject,
                start=start,
                end=end,
                description=draft.description or "",
                location=draft.location or "",
                status=self._normalizer.resolve_status(draft.status),
            )
            self._keys.add_or_raise(event.subject, event.start, event.end)
            self._events[event.id] = event
            logger.debug("Created event %s (%s %s-%s)", event.id, event.subject, event.start, event.end)
            return event.id

    def create_series(self, draft: SeriesDraft) -> SeriesId:
        """Expand ``draft`` and store every occurrence, or none of them."""

        draft.precheck()
        with self._lock:
            dates = self._expander.expand(draft.start_date, draft.rule)
            if not dates:
                raise ValidationError("Recurrence produces no occurrences", subject=draft.subject)

            status = self._normalizer.resolve_status(draft.status)
            occurrences = [
                self._build_occurrence(draft, day, status)
                for day in dates
            ]
            keys = [UniquenessIndex.key(event.subject, event.start, event.end) for event in occurrences]
            self._keys.add_many(keys, labels={key: event.subject for key, event in zip(keys, occurrences)})
            for event in occurrences:
                self._events[event.id] = event

            series_id = self._series.register_series(event.id for event in occurrences)
            logger.debug(
                "Created series %s for %r with %d occurrences (%s..%s)",
                series_id,
                draft.subject,
                len(occurrences),
                dates[0],
                dates[-1],
            )
            return series_id

    def _build_occurrence(self, draft: SeriesDraft, day: date, status: EventStatus) -> Event:
        if draft.all_day:
            start, end = self._normalizer.all_day_window(day)
        else:
            # precheck() has already required both times for timed series.
            start = datetime.combine(day, cast(time, draft.start_time))
            end = datetime.combine(day, cast(time, draft.end_time))
        return Event(
            subject=draft.subject,
            start=start,
            end=end,
            description=draft.description or "",
            location=draft.location or "",
            status=status,
        )

    def group_as_series(self, event_ids: Iterable[EventId]) -> SeriesId:
        """Register existing, ungrouped events as one new series."""

        members = list(event_ids)
        with self._lock:
            if not members:
                raise ValidationError("A series needs at least one event")
            if len(set(members)) != len(members):
                raise ValidationError("Series members must be distinct")
            for event_id in members:
                event = self._require(event_id)
                if self._series.series_of(event_id) is not None:
                    raise ValidationError("Event already belongs to a series", subject=event.subject)
            ordered = sorted(members, key=lambda event_id: self._events[event_id].start)
            series_id = self._series.register_series(ordered)
            logger.debug("Grouped %d events as series %s", len(ordered), series_id)
            return series_id

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------
    def update_by_selector(
        self,
        selector: EventSelector,
        patch: EventPatch,
        scope: EditScope = EditScope.SINGLE,
    ) -> List[Event]:
        """Apply ``patch`` to the selected event and, per ``scope``, its series.

        Events outside a series are always edited as :attr:`EditScope.SINGLE`.
        Returns the replaced events in chronological order.
        """

        if patch.is_empty:
            raise ValidationError("Patch does not change anything", subject=selector.subject)
        try:
            scope = EditScope(scope)
        except ValueError as exc:
            raise ValidationError(f"Unknown edit scope: {scope!r}", subject=selector.subject) from exc
        with self._lock:
            anchor = SelectorResolver(self._events).resolve(selector)
            series_id = self._series.series_of(anchor.id)
            if series_id is None or scope is EditScope.SINGLE:
                updated = self._edit_single(anchor, patch, series_id)
            elif scope is EditScope.FOLLOWING:
                updated = self._edit_following(anchor, patch, series_id)
            else:
                updated = self._edit_series(anchor, patch, series_id)
            return _chronological(updated)

    def _edit_single(self, anchor: Event, patch: EventPatch, series_id: Optional[SeriesId]) -> List[Event]:
        prepared = self._patcher.prepare([(anchor.id, patch)])
        if series_id is not None and patch.changes_start(anchor):
            self._series.detach(anchor.id)
            logger.debug("Detached %s from series %s", anchor.id, series_id)
        return self._patcher.commit(prepared)

    def _edit_following(self, anchor: Event, patch: EventPatch, series_id: SeriesId) -> List[Event]:
        targets = self._series.following(series_id, anchor.start, self._events)
        prepared = self._patcher.prepare(
            (event_id, PatchApplier.adjust_for_series(self._events[event_id], patch)) for event_id in targets
        )
        if PatchApplier.adjust_for_series(anchor, patch).changes_start(anchor):
            new_series_id = self._series.split_following(series_id, anchor.start, self._events)
            logger.debug(
                "Split series %s at %s into %s (%d events moved)",
                series_id,
                anchor.start,
                new_series_id,
                len(targets),
            )
        return self._patcher.commit(prepared)

    def _edit_series(self, anchor: Event, patch: EventPatch, series_id: SeriesId) -> List[Event]:
        targets = self._series.all(series_id)
        prepared = self._patcher.prepare(
            (event_id, PatchApplier.adjust_for_series(self._events[event_id], patch)) for event_id in targets
        )
        logger.debug("Editing all %d events of series %s via %s", len(targets), series_id, anchor.id)
        return self._patcher.commit(prepared)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def events_on(self, day: date) -> List[Event]:
        start = datetime.combine(day, datetime.min.time())
        return self.events_overlapping(start, start + timedelta(days=1))

    def events_overlapping(self, start: datetime, end: datetime) -> List[Event]:
        require_naive(start, "start")
        require_naive(end, "end")
        if end <= start:
            raise ValidationError("Range end must be after start")
        with self._lock:
            return _chronological(event for event in self._events.values() if event.overlaps(start, end))

    def status_at(self, instant: datetime) -> BusyStatus:
        require_naive(instant, "instant")
        with self._lock:
            busy = any(event.contains(instant) for event in self._events.values())
        return BusyStatus.BUSY if busy else BusyStatus.AVAILABLE

    def all_events(self) -> List[Event]:
        with self._lock:
            return _chronological(self._events.values())

    def get(self, event_id: EventId) -> Event:
        with self._lock:
            return self._require(event_id)

    def resolve(self, selector: EventSelector) -> Event:
        with self._lock:
            return SelectorResolver(self._events).resolve(selector)

    def series_of(self, event_id: EventId) -> Optional[SeriesId]:
        with self._lock:
            self._require(event_id)
            return self._series.series_of(event_id)

    def series_events(self, series_id: SeriesId) -> List[Event]:
        with self._lock:
            if series_id not in self._series:
                raise NotFoundError(f"Series {series_id} not found")
            members = [self._events[event_id] for event_id in self._series.all(series_id)]
        return _chronological(members)

    def _require(self, event_id: EventId) -> Event:
        event = self._events.get(event_id)
        if event is None:
            raise NotFoundError(f"Event {event_id} not found")
        return event


__all__ = ["InMemoryCalendar"]
