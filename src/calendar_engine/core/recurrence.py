from __future__ import annotations

import heapq
from datetime import date, timedelta
from typing import List, Set, cast

from ..domain import RecurrenceRule

_WEEK = timedelta(days=7)
_DAY = timedelta(days=1)


class RecurrenceExpander:
    """Turns a start date and a :class:`RecurrenceRule` into concrete dates.

    Count-bounded rules walk the wanted weekdays as a merge of weekly streams;
    until-bounded rules scan every day up to and including ``until``. Both
    produce the same dates for the same effective parameters.
    """

    def expand(self, start_date: date, rule: RecurrenceRule) -> List[date]:
        wanted = self._wanted_weekdays(rule)
        if rule.count is not None:
            return self._expand_count(start_date, wanted, rule.count)
        # RecurrenceRule guarantees until is set whenever count is not.
        return self._expand_until(start_date, wanted, cast(date, rule.until))

    @staticmethod
    def _wanted_weekdays(rule: RecurrenceRule) -> Set[int]:
        wanted = {weekday.python_weekday for weekday in rule.weekdays}
        if not wanted:
            raise RuntimeError("Invalid weekday mapping for recurrence expansion")
        return wanted

    @staticmethod
    def _expand_count(start_date: date, wanted: Set[int], count: int) -> List[date]:
        # One pending occurrence per weekday; always emit the earliest.
        start_weekday = start_date.weekday()
        pending = [start_date + timedelta(days=(weekday - start_weekday) % 7) for weekday in wanted]
        heapq.heapify(pending)

        dates: List[date] = []
        while len(dates) < count:
            current = heapq.heappop(pending)
            dates.append(current)
            heapq.heappush(pending, current + _WEEK)
        return dates

    @staticmethod
    def _expand_until(start_date: date, wanted: Set[int], until: date) -> List[date]:
        dates: List[date] = []
        current = start_date
        while current <= until:
            if current.weekday() in wanted:
                dates.append(current)
            current += _DAY
        return dates


__all__ = ["RecurrenceExpander"]
