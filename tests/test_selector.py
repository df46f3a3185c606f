from datetime import datetime

import pytest

from calendar_engine import AmbiguousSelectionError, EventSelector, NotFoundError, ValidationError
from calendar_engine.core import SelectorResolver
from calendar_engine.domain import Event

START = datetime(2025, 1, 1, 10, 0)


@pytest.fixture
def events():
    first = Event(subject="Review", start=START, end=START.replace(hour=11))
    second = Event(subject="review", start=START, end=START.replace(hour=12))
    other = Event(subject="Lunch", start=START.replace(hour=12), end=START.replace(hour=13))
    return {event.id: event for event in (first, second, other)}


class TestResolve:
    def test_exact_match_with_end(self, events):
        event = SelectorResolver(events).resolve(EventSelector("REVIEW ", START, START.replace(hour=12)))
        assert event.end == START.replace(hour=12)

    def test_unique_without_end(self, events):
        event = SelectorResolver(events).resolve(EventSelector("lunch", START.replace(hour=12)))
        assert event.subject == "Lunch"

    def test_ambiguous_without_end(self, events):
        with pytest.raises(AmbiguousSelectionError) as exc_info:
            SelectorResolver(events).resolve(EventSelector("Review", START))
        assert exc_info.value.candidates == 2
        # Ambiguity is reported as a validation problem.
        assert isinstance(exc_info.value, ValidationError)

    def test_missing(self, events):
        with pytest.raises(NotFoundError):
            SelectorResolver(events).resolve(EventSelector("Review", START.replace(hour=9)))

    def test_wrong_end_is_missing(self, events):
        with pytest.raises(NotFoundError):
            SelectorResolver(events).resolve(EventSelector("Lunch", START.replace(hour=12), START.replace(hour=14)))
