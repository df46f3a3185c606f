from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Mapping, Optional

from ..domain import Event, EventId, SeriesId


@dataclass
class SeriesIndex:
    """Bidirectional membership between events and recurrence series.

    Both maps always describe the same memberships, and a series with no
    members is dropped as soon as it empties.
    """

    event_to_series: Dict[EventId, SeriesId] = field(default_factory=dict)
    series_to_events: Dict[SeriesId, List[EventId]] = field(default_factory=dict)

    def __contains__(self, series_id: object) -> bool:
        return series_id in self.series_to_events

    def series_ids(self) -> List[SeriesId]:
        return list(self.series_to_events)

    def register_series(self, event_ids: Iterable[EventId]) -> SeriesId:
        members = list(event_ids)
        series_id = SeriesId.new()
        if not members:
            return series_id
        self.series_to_events[series_id] = members
        for event_id in members:
            self.event_to_series[event_id] = series_id
        return series_id

    def series_of(self, event_id: EventId) -> Optional[SeriesId]:
        return self.event_to_series.get(event_id)

    def all(self, series_id: SeriesId) -> List[EventId]:
        return list(self.series_to_events.get(series_id, ()))

    def following(self, series_id: SeriesId, cutoff: datetime, events: Mapping[EventId, Event]) -> List[EventId]:
        members = [
            event_id
            for event_id in self.series_to_events.get(series_id, ())
            if events[event_id].start >= cutoff
        ]
        return sorted(members, key=lambda event_id: events[event_id].start)

    def detach(self, event_id: EventId) -> None:
        series_id = self.event_to_series.pop(event_id, None)
        if series_id is None:
            return
        members = self.series_to_events.get(series_id)
        if members is None:
            return
        if event_id in members:
            members.remove(event_id)
        if not members:
            self.series_to_events.pop(series_id, None)

    def split_following(self, series_id: SeriesId, cutoff: datetime, events: Mapping[EventId, Event]) -> SeriesId:
        """Move members starting at or after ``cutoff`` into a fresh series.

        Returns the new series id, or ``series_id`` itself when nothing moves.
        """

        keep: List[EventId] = []
        move: List[EventId] = []
        for event_id in self.series_to_events.get(series_id, ()):
            event = events.get(event_id)
            if event is not None and event.start >= cutoff:
                move.append(event_id)
            else:
                keep.append(event_id)

        if not move:
            return series_id

        new_series_id = SeriesId.new()
        self.series_to_events[new_series_id] = move
        for event_id in move:
            self.event_to_series[event_id] = new_series_id

        if keep:
            self.series_to_events[series_id] = keep
        else:
            self.series_to_events.pop(series_id, None)
        return new_series_id
