from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Dict, List

from ..domain import ConflictError, Event, EventDraft, EventId, EventSelector, SeriesId, ValidationError
from .zoned import ZonedCalendar
from .zones import to_zone_local

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CopyFailure:
    subject: str
    start: datetime
    reason: str


@dataclass(slots=True)
class CopyReport:
    """Outcome of a batch copy; conflicting events are skipped, not fatal."""

    copied: List[EventId] = field(default_factory=list)
    failures: List[CopyFailure] = field(default_factory=list)
    series: List[SeriesId] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def raise_for_failures(self) -> None:
        if self.ok:
            return
        subjects = ", ".join(sorted({failure.subject for failure in self.failures}))
        raise ConflictError(
            f"{len(self.failures)} event(s) could not be copied: {subjects}",
            subject=self.failures[0].subject,
            detail=subjects,
        )


def _draft_for(event: Event, start: datetime, end: datetime) -> EventDraft:
    return EventDraft(
        subject=event.subject,
        start=start,
        end=end,
        description=event.description,
        location=event.location,
        status=event.status,
    )


@dataclass(slots=True)
class EventCopier:
    """Replays events from one zoned calendar into another.

    Copies go through the target's ordinary ``create`` so its uniqueness and
    validation rules apply unchanged.
    """

    regroup_series: bool = True

    def copy_event(
        self,
        source: ZonedCalendar,
        subject: str,
        start: datetime,
        target: ZonedCalendar,
        target_start: datetime,
    ) -> EventId:
        """Copy one event so it starts at ``target_start`` in the target's own wall clock.

        The duration is preserved; no zone conversion is applied.
        """

        event = source.resolve(EventSelector(subject=subject, start=start))
        draft = _draft_for(event, target_start, target_start + event.duration)
        try:
            event_id = target.create(draft)
        except ConflictError as exc:
            raise ConflictError(
                f"Cannot copy event '{event.subject}': {exc.message}",
                subject=event.subject,
                key=exc.key,
            ) from exc
        logger.debug("Copied %s from %s to %s at %s", event.subject, source.name, target.name, target_start)
        return event_id

    def copy_events_on(
        self,
        source: ZonedCalendar,
        day: date,
        target: ZonedCalendar,
        target_day: date,
    ) -> CopyReport:
        return self._copy_batch(source, source.events_on(day), target, target_day - day)

    def copy_events_between(
        self,
        source: ZonedCalendar,
        first_day: date,
        last_day: date,
        target: ZonedCalendar,
        target_first_day: date,
    ) -> CopyReport:
        """Copy every event overlapping ``first_day``..``last_day`` (inclusive)."""

        if last_day < first_day:
            raise ValidationError("End date must be on or after start date")
        range_start = datetime.combine(first_day, datetime.min.time())
        range_end = datetime.combine(last_day + timedelta(days=1), datetime.min.time())
        events = source.events_overlapping(range_start, range_end)
        return self._copy_batch(source, events, target, target_first_day - first_day)

    def _copy_batch(
        self,
        source: ZonedCalendar,
        events: List[Event],
        target: ZonedCalendar,
        offset: timedelta,
    ) -> CopyReport:
        report = CopyReport()
        grouped: Dict[SeriesId, List[EventId]] = {}
        for event in events:
            start = to_zone_local(event.start, source.zone, target.zone) + offset
            end = to_zone_local(event.end, source.zone, target.zone) + offset
            try:
                event_id = target.create(_draft_for(event, start, end))
            except ConflictError as exc:
                logger.warning("Skipping copy of %s at %s: %s", event.subject, start, exc.message)
                report.failures.append(CopyFailure(event.subject, start, exc.message))
                continue
            report.copied.append(event_id)
            series_id = source.series_of(event.id)
            if series_id is not None:
                grouped.setdefault(series_id, []).append(event_id)

        if self.regroup_series:
            for members in grouped.values():
                report.series.append(target.group_as_series(members))

        logger.info(
            "Copied %d of %d events from %s to %s",
            len(report.copied),
            len(events),
            source.name,
            target.name,
        )
        return report


__all__ = ["CopyFailure", "CopyReport", "EventCopier"]
