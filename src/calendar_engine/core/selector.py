from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping

from ..domain import AmbiguousSelectionError, Event, EventId, EventSelector, NotFoundError


def _normalize_subject(subject: str) -> str:
    return subject.strip().lower()


@dataclass(frozen=True, slots=True)
class SelectorResolver:
    """Finds the single event a selector points at.

    With an end time the match is exact on (subject, start, end). Without one
    the match is on (subject, start) and more than one hit is ambiguous.
    Subjects compare case-insensitively.
    """

    events: Mapping[EventId, Event]

    def candidates(self, selector: EventSelector) -> List[Event]:
        subject = _normalize_subject(selector.subject)
        return [
            event
            for event in self.events.values()
            if _normalize_subject(event.subject) == subject
            and event.start == selector.start
            and (selector.end is None or event.end == selector.end)
        ]

    def resolve(self, selector: EventSelector) -> Event:
        matches = self.candidates(selector)
        if not matches:
            raise NotFoundError(f"No event found for {selector.describe()}", subject=selector.subject)
        if len(matches) > 1:
            # Only reachable without an end time; exact matches are unique keys.
            raise AmbiguousSelectionError(
                f"Ambiguous selector {selector.describe()}: specify an end time",
                subject=selector.subject,
                candidates=len(matches),
            )
        return matches[0]
