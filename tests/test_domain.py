"""Value types: events, identifiers, recurrence rules and weekday codes."""

from dataclasses import replace
from datetime import date, datetime, timedelta, timezone

import pytest

from calendar_engine import (
    EventPatch,
    EventStatus,
    RecurrenceRule,
    ValidationError,
    Weekday,
)
from calendar_engine.domain import ErrorKind, Event, EventId, NotFoundError


START = datetime(2025, 1, 1, 10, 0)
END = datetime(2025, 1, 1, 11, 0)


class TestEvent:
    def test_subject_is_trimmed(self):
        event = Event(subject="  Review  ", start=START, end=END)
        assert event.subject == "Review"

    def test_blank_subject_rejected(self):
        with pytest.raises(ValidationError):
            Event(subject="   ", start=START, end=END)

    def test_end_must_follow_start(self):
        with pytest.raises(ValidationError):
            Event(subject="A", start=START, end=START)

    def test_aware_timestamps_rejected(self):
        with pytest.raises(ValidationError):
            Event(subject="A", start=START.replace(tzinfo=timezone.utc), end=END.replace(tzinfo=timezone.utc))

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            Event(subject="A", start=START, end=END, status="secret")

    def test_status_string_is_coerced(self):
        assert Event(subject="A", start=START, end=END, status="private").status is EventStatus.PRIVATE

    def test_equality_is_by_identifier(self):
        first = Event(subject="A", start=START, end=END)
        twin = Event(subject="A", start=START, end=END)
        edited = replace(first, subject="B")
        assert first != twin
        assert first == edited
        assert hash(first) == hash(edited)

    def test_replace_revalidates(self):
        event = Event(subject="A", start=START, end=END)
        with pytest.raises(ValidationError):
            replace(event, end=START - timedelta(minutes=1))

    def test_half_open_interval(self):
        event = Event(subject="A", start=START, end=END)
        assert event.contains(START)
        assert not event.contains(END)
        assert event.overlaps(START - timedelta(hours=1), START + timedelta(minutes=1))
        assert not event.overlaps(END, END + timedelta(hours=1))
        assert event.duration == timedelta(hours=1)


class TestIdentifiers:
    def test_new_ids_are_distinct(self):
        assert EventId.new() != EventId.new()

    def test_str_is_uuid_text(self):
        event_id = EventId.new()
        assert str(event_id) == str(event_id.value)


class TestRecurrenceRule:
    def test_requires_weekdays(self):
        with pytest.raises(ValidationError):
            RecurrenceRule(weekdays=frozenset(), count=2)

    def test_requires_exactly_one_terminator(self):
        with pytest.raises(ValidationError):
            RecurrenceRule(weekdays={Weekday.MONDAY})
        with pytest.raises(ValidationError):
            RecurrenceRule(weekdays={Weekday.MONDAY}, count=2, until=date(2025, 1, 1))

    def test_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            RecurrenceRule.for_count({Weekday.MONDAY}, 0)

    def test_weekdays_frozen(self):
        rule = RecurrenceRule.until_date([Weekday.MONDAY, Weekday.MONDAY], date(2025, 2, 1))
        assert rule.weekdays == frozenset({Weekday.MONDAY})

    def test_letter_codes_coerced(self):
        rule = RecurrenceRule(weekdays=frozenset({"M", "w"}), count=3)
        assert rule.weekdays == {Weekday.MONDAY, Weekday.WEDNESDAY}
        assert all(isinstance(weekday, Weekday) for weekday in rule.weekdays)

    @pytest.mark.parametrize("weekdays", [{"X"}, {3}, {Weekday.MONDAY, None}])
    def test_unknown_weekdays_rejected(self, weekdays):
        with pytest.raises(ValidationError):
            RecurrenceRule(weekdays=frozenset(weekdays), count=3)

    @pytest.mark.parametrize("count", [2.5, True, "3"])
    def test_count_must_be_integer(self, count):
        with pytest.raises(ValidationError):
            RecurrenceRule.for_count({Weekday.MONDAY}, count)

    def test_until_must_be_date(self):
        with pytest.raises(ValidationError):
            RecurrenceRule.until_date({Weekday.MONDAY}, "2025-02-01")


class TestWeekday:
    def test_parse_codes(self):
        assert Weekday.parse("MWF") == {Weekday.MONDAY, Weekday.WEDNESDAY, Weekday.FRIDAY}
        assert Weekday.parse("ru") == {Weekday.THURSDAY, Weekday.SUNDAY}

    def test_parse_rejects_unknown_code(self):
        with pytest.raises(ValidationError):
            Weekday.parse("MX")

    def test_parse_rejects_blank(self):
        with pytest.raises(ValidationError):
            Weekday.parse("  ")

    def test_python_weekday_alignment(self):
        # 2025-05-05 is a Monday
        assert Weekday.from_date(date(2025, 5, 5)) is Weekday.MONDAY
        assert Weekday.SUNDAY.python_weekday == 6


class TestEventPatch:
    def test_fields_lists_present_values(self):
        patch = EventPatch(subject="B", location="")
        assert patch.fields() == ["subject", "location"]
        assert not patch.is_empty

    def test_empty_patch(self):
        assert EventPatch().is_empty

    def test_changes_start(self):
        event = Event(subject="A", start=START, end=END)
        assert EventPatch(start=START + timedelta(minutes=30)).changes_start(event)
        assert not EventPatch(start=START).changes_start(event)
        assert not EventPatch(subject="B").changes_start(event)


class TestErrors:
    def test_kinds(self):
        assert ValidationError("x").kind is ErrorKind.VALIDATION
        assert NotFoundError("x").kind is ErrorKind.NOT_FOUND

    def test_to_dict_carries_subject(self):
        payload = ValidationError("bad", subject="A").to_dict()
        assert payload == {"kind": "validation", "message": "bad", "subject": "A", "detail": None}
