from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Dict, Iterable, List, Tuple

from ..data import UniquenessIndex
from ..domain import Event, EventId, EventPatch, NotFoundError
from ..domain.models import require_naive


@dataclass(frozen=True, slots=True)
class PreparedEdit:
    previous: Event
    replacement: Event

    @property
    def old_key(self) -> str:
        return UniquenessIndex.key(self.previous.subject, self.previous.start, self.previous.end)

    @property
    def new_key(self) -> str:
        return UniquenessIndex.key(self.replacement.subject, self.replacement.start, self.replacement.end)


class PatchApplier:
    """Copy-on-write edits over the event table and its uniqueness index.

    The table entry and the index key are swapped together; when the index
    rejects a key the table is left as it was.
    """

    def __init__(self, events: Dict[EventId, Event], index: UniquenessIndex) -> None:
        self._events = events
        self._index = index

    def current(self, event_id: EventId) -> Event:
        event = self._events.get(event_id)
        if event is None:
            raise NotFoundError(f"Event {event_id} not found")
        return event

    @staticmethod
    def merge(current: Event, patch: EventPatch) -> Event:
        changes = {name: getattr(patch, name) for name in patch.fields()}
        # Event.__post_init__ re-validates; the id is carried over by replace().
        return replace(current, **changes)

    @staticmethod
    def adjust_for_series(current: Event, patch: EventPatch) -> EventPatch:
        """Rebase ``patch`` onto ``current``'s own dates.

        A new start or end contributes only its time of day. Without a new end
        the event keeps its duration. Aware datetimes are rejected before their
        offset could be dropped.
        """

        start = end = None
        if patch.start is not None:
            start = datetime.combine(current.start.date(), require_naive(patch.start, "start").time())
        if patch.end is not None:
            end = datetime.combine(current.end.date(), require_naive(patch.end, "end").time())
        elif start is not None:
            end = start + current.duration
        return replace(patch, start=start, end=end)

    def apply(self, event_id: EventId, patch: EventPatch) -> Event:
        previous = self.current(event_id)
        edit = PreparedEdit(previous, self.merge(previous, patch))
        self._index.replace_or_raise(edit.old_key, edit.new_key, subject=edit.replacement.subject)
        self._events[event_id] = edit.replacement
        return edit.replacement

    def prepare(self, items: Iterable[Tuple[EventId, EventPatch]]) -> List[PreparedEdit]:
        """Build and validate every replacement without touching any state."""

        prepared: List[PreparedEdit] = []
        for event_id, patch in items:
            previous = self.current(event_id)
            prepared.append(PreparedEdit(previous, self.merge(previous, patch)))
        self._index.ensure_available(
            [edit.new_key for edit in prepared],
            releasing=[edit.old_key for edit in prepared],
            labels={edit.new_key: edit.replacement.subject for edit in prepared},
        )
        return prepared

    def commit(self, prepared: List[PreparedEdit]) -> List[Event]:
        self._index.replace_many(
            [(edit.old_key, edit.new_key) for edit in prepared],
            labels={edit.new_key: edit.replacement.subject for edit in prepared},
        )
        for edit in prepared:
            self._events[edit.replacement.id] = edit.replacement
        return [edit.replacement for edit in prepared]

    def apply_many(self, items: Iterable[Tuple[EventId, EventPatch]]) -> List[Event]:
        return self.commit(self.prepare(items))
