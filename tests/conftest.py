"""Shared fixtures for the calendar engine tests."""

from datetime import date, time

import pytest

from calendar_engine import (
    CalendarSettings,
    EventDraft,
    InMemoryCalendar,
    RecurrenceRule,
    SeriesDraft,
    Weekday,
)


@pytest.fixture
def settings():
    return CalendarSettings.defaults()


@pytest.fixture
def cal(settings):
    """Fresh engine with the default 08:00-17:00 all-day window."""
    return InMemoryCalendar(settings)


@pytest.fixture
def standup(cal):
    """Mon/Wed 10:00-10:15 standup from Monday 2025-05-05, three occurrences."""
    draft = SeriesDraft(
        subject="Standup",
        start_date=date(2025, 5, 5),
        rule=RecurrenceRule.for_count({Weekday.MONDAY, Weekday.WEDNESDAY}, 3),
        start_time=time(10, 0),
        end_time=time(10, 15),
    )
    return cal.create_series(draft)


@pytest.fixture
def make_event(cal):
    """Create a timed single event and return its id."""

    def _make(subject, start, end, **extra):
        return cal.create(EventDraft(subject=subject, start=start, end=end, **extra))

    return _make
