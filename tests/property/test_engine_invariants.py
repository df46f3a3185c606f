"""Property-based checks for engine invariants under random edit sequences."""

from datetime import date, datetime, time, timedelta

from hypothesis import given, settings
from hypothesis import strategies as st

from calendar_engine import (
    CalendarError,
    EditScope,
    EventDraft,
    EventPatch,
    EventSelector,
    InMemoryCalendar,
    RecurrenceRule,
    SeriesDraft,
    Weekday,
)

BASE = datetime(2025, 5, 5)

subjects = st.sampled_from(["Standup", "standup", "Review", "Lunch"])
slots = st.integers(min_value=0, max_value=20)
lengths = st.sampled_from([15, 30, 60])

create_ops = st.tuples(st.just("create"), subjects, slots, lengths)
edit_ops = st.tuples(st.just("edit"), st.integers(min_value=0, max_value=50), slots, st.sampled_from(list(EditScope)))
operations = st.lists(st.one_of(create_ops, edit_ops), max_size=25)


def _slot(index):
    return BASE + timedelta(hours=8 + (index % 10), days=index // 10)


def _assert_unique(cal):
    triples = [(event.subject.lower(), event.start, event.end) for event in cal.all_events()]
    assert len(triples) == len(set(triples))


@settings(max_examples=100, deadline=None)
@given(operations)
def test_live_events_never_share_a_key(ops):
    cal = InMemoryCalendar()
    cal.create_series(
        SeriesDraft(
            subject="Standup",
            start_date=BASE.date(),
            rule=RecurrenceRule.for_count({Weekday.MONDAY, Weekday.WEDNESDAY, Weekday.FRIDAY}, 6),
            start_time=time(9, 0),
            end_time=time(9, 15),
        )
    )
    for op in ops:
        try:
            if op[0] == "create":
                _, subject, slot, minutes = op
                start = _slot(slot)
                cal.create(EventDraft(subject=subject, start=start, end=start + timedelta(minutes=minutes)))
            else:
                _, pick, slot, scope = op
                events = cal.all_events()
                target = events[pick % len(events)]
                new_start = _slot(slot)
                cal.update_by_selector(
                    EventSelector(target.subject, target.start, target.end),
                    EventPatch(start=new_start, end=new_start + target.duration),
                    scope,
                )
        except CalendarError:
            pass
        _assert_unique(cal)


@settings(max_examples=50, deadline=None)
@given(
    count=st.integers(min_value=2, max_value=12),
    pick=st.integers(min_value=0, max_value=11),
    hour=st.integers(min_value=0, max_value=22),
    minute=st.sampled_from([0, 15, 30, 45]),
    scope=st.sampled_from([EditScope.FOLLOWING, EditScope.ENTIRE_SERIES]),
)
def test_start_only_series_edit_preserves_durations(count, pick, hour, minute, scope):
    cal = InMemoryCalendar()
    series_id = cal.create_series(
        SeriesDraft(
            subject="Standup",
            start_date=date(2025, 5, 5),
            rule=RecurrenceRule.for_count({Weekday.TUESDAY, Weekday.THURSDAY}, count),
            start_time=time(10, 0),
            end_time=time(10, 40),
        )
    )
    members = cal.series_events(series_id)
    anchor = members[pick % len(members)]
    new_start = datetime.combine(anchor.start.date(), time(hour, minute))
    updated = cal.update_by_selector(EventSelector(anchor.subject, anchor.start), EventPatch(start=new_start), scope)
    assert updated
    assert all(event.duration == timedelta(minutes=40) for event in updated)
    assert all(event.start.time() == time(hour, minute) for event in updated)
    untouched = [event for event in cal.all_events() if event not in updated]
    assert all(event.start.time() == time(10, 0) for event in untouched)
