from datetime import date, datetime, timezone

import pytest

from calendar_engine import BusyStatus, ValidationError


@pytest.fixture
def day_events(make_event):
    make_event("Late", datetime(2025, 1, 1, 15), datetime(2025, 1, 1, 16))
    make_event("Early", datetime(2025, 1, 1, 10), datetime(2025, 1, 1, 11))
    make_event("Overnight", datetime(2025, 1, 1, 23), datetime(2025, 1, 2, 1))


class TestEventsOverlapping:
    def test_half_open_boundaries(self, cal, day_events):
        assert cal.events_overlapping(datetime(2025, 1, 1, 9, 30), datetime(2025, 1, 1, 10)) == []
        assert cal.events_overlapping(datetime(2025, 1, 1, 11), datetime(2025, 1, 1, 11, 30)) == []
        hits = cal.events_overlapping(datetime(2025, 1, 1, 10, 59), datetime(2025, 1, 1, 15, 1))
        assert [event.subject for event in hits] == ["Early", "Late"]

    def test_empty_range_rejected(self, cal):
        with pytest.raises(ValidationError):
            cal.events_overlapping(datetime(2025, 1, 1, 11), datetime(2025, 1, 1, 11))

    def test_reversed_range_rejected(self, cal):
        with pytest.raises(ValidationError):
            cal.events_overlapping(datetime(2025, 1, 1, 11), datetime(2025, 1, 1, 10))

    def test_aware_bounds_rejected(self, cal):
        with pytest.raises(ValidationError):
            cal.events_overlapping(
                datetime(2025, 1, 1, 10, tzinfo=timezone.utc),
                datetime(2025, 1, 1, 11, tzinfo=timezone.utc),
            )


class TestEventsOn:
    def test_sorted_by_start(self, cal, day_events):
        assert [event.subject for event in cal.events_on(date(2025, 1, 1))] == ["Early", "Late", "Overnight"]

    def test_spanning_event_on_next_day(self, cal, day_events):
        assert [event.subject for event in cal.events_on(date(2025, 1, 2))] == ["Overnight"]

    def test_empty_day(self, cal, day_events):
        assert cal.events_on(date(2025, 1, 3)) == []


class TestStatusAt:
    def test_start_inclusive_end_exclusive(self, cal, day_events):
        assert cal.status_at(datetime(2025, 1, 1, 10)) is BusyStatus.BUSY
        assert cal.status_at(datetime(2025, 1, 1, 11)) is BusyStatus.AVAILABLE
        assert cal.status_at(datetime(2025, 1, 1, 9, 59)) is BusyStatus.AVAILABLE

    def test_empty_calendar_available(self, cal):
        assert cal.status_at(datetime(2025, 1, 1, 10)) is BusyStatus.AVAILABLE


class TestAllEvents:
    def test_snapshot_is_independent(self, cal, day_events):
        snapshot = cal.all_events()
        snapshot.clear()
        assert len(cal.all_events()) == 3

    def test_ties_break_on_end(self, cal, make_event):
        make_event("B", datetime(2025, 1, 1, 10), datetime(2025, 1, 1, 12))
        make_event("A", datetime(2025, 1, 1, 10), datetime(2025, 1, 1, 11))
        assert [event.subject for event in cal.all_events()] == ["A", "B"]
