"""
tests/calendar/test_iterator.py

Covers:
  - Forward iteration from an anchor date
  - Interleaved forward / backward steps on a shared cursor
  - FIFTH patterns skipping years without an occurrence
  - Window configuration (starting_at, ending_at, widening)
  - Exhaustion at the representable range
  - NumPy export
"""

from datetime import date
from itertools import islice

import numpy as np
import pytest

from yearly.calendar import (
    DayOfMonth,
    Holiday,
    HolidayIter,
    Month,
    NthWeekday,
    NthWeekdayOfMonth,
    Weekday,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def thanksgiving():
    return Holiday.new_nth("Thanksgiving", NthWeekday.FOURTH, Weekday.THURSDAY, Month.NOVEMBER)


@pytest.fixture
def halloween():
    return Holiday.new_fixed("Halloween", Month.OCTOBER, 31)


# ── Stepping ──────────────────────────────────────────────────────────────────

class TestStepping:

    def test_forward_then_back(self, thanksgiving):
        it = thanksgiving.iter().at(date(2020, 11, 1))
        assert next(it) == date(2020, 11, 26)
        assert next(it) == date(2021, 11, 25)
        assert next(it) == date(2022, 11, 24)
        assert it.next_back() == date(2021, 11, 25)
        assert it.next_back() == date(2020, 11, 26)
        assert it.next_back() == date(2019, 11, 28)

    def test_first_wednesday_in_january(self):
        jan = Holiday.new_nth("First Wednesday in January", NthWeekday.FIRST, Weekday.WEDNESDAY, 1)
        it = jan.iter().at(date(2020, 1, 1))
        assert list(islice(it, 4)) == [
            date(2020, 1, 1),
            date(2021, 1, 6),
            date(2022, 1, 5),
            date(2023, 1, 4),
        ]

    def test_fifth_wednesday_in_december(self):
        dec = Holiday.new_nth("Fifth Wednesday in December", NthWeekday.FIFTH, Weekday.WEDNESDAY, 12)
        it = dec.iter().at(date(2020, 12, 1))
        assert next(it) == date(2020, 12, 30)
        assert next(it) == date(2021, 12, 29)
        assert next(it) == date(2025, 12, 31)

    def test_fresh_iterator_starts_at_first_date(self, halloween):
        it = halloween.iter()
        assert it.current is None
        assert next(it) == date(1, 10, 31)
        assert next(it) == date(2, 10, 31)

    def test_fresh_iterator_cannot_step_back(self, halloween):
        with pytest.raises(StopIteration):
            halloween.iter().next_back()

    def test_bare_pattern_iterates(self):
        it = DayOfMonth(Month.MARCH, 17).iter().at(date(2020, 3, 18))
        assert next(it) == date(2021, 3, 17)

    def test_at_is_inclusive(self, halloween):
        it = halloween.iter().at(date(2020, 10, 31))
        assert next(it) == date(2020, 10, 31)

    def test_every_thanksgiving_in_a_cycle(self, thanksgiving):
        it = thanksgiving.iter().at(date(2000, 1, 1)).ending_at(date(2400, 1, 1))
        dates = list(it)
        assert len(dates) == 400
        assert {d.day for d in dates} == set(range(22, 29))
        assert all(thanksgiving == d for d in dates)


# ── Window ────────────────────────────────────────────────────────────────────

class TestWindow:

    def test_ending_at_bounds_forward(self, thanksgiving):
        it = thanksgiving.iter().at(date(2020, 11, 1)).ending_at(date(2023, 1, 1))
        assert list(it) == [date(2020, 11, 26), date(2021, 11, 25), date(2022, 11, 24)]

    def test_exhausted_stays_exhausted(self, thanksgiving):
        it = thanksgiving.iter().at(date(2020, 11, 1)).ending_at(date(2021, 1, 1))
        assert list(it) == [date(2020, 11, 26)]
        with pytest.raises(StopIteration):
            next(it)
        with pytest.raises(StopIteration):
            next(it)

    def test_starting_at_sets_first_occurrence(self, thanksgiving):
        it = thanksgiving.iter().starting_at(date(2019, 12, 1))
        assert it.first == date(2020, 11, 26)

    def test_backward_stops_once_cursor_passes_first(self, thanksgiving):
        it = thanksgiving.iter().starting_at(date(2019, 12, 1)).at(date(2021, 1, 1))
        assert list(it.iter_back()) == [date(2020, 11, 26), date(2019, 11, 28)]

    def test_at_widens_window(self, thanksgiving):
        it = thanksgiving.iter().starting_at(date(2020, 1, 1)).ending_at(date(2021, 1, 1))
        it.at(date(2030, 6, 1))
        assert it.last == date(2030, 6, 1)
        assert it.first == date(2020, 11, 26)

    def test_shift_from_only_widens(self, halloween):
        it = halloween.iter().starting_at(date(2020, 1, 1)).ending_at(date(2030, 1, 1))
        first, last = it.first, it.last
        it.shift_from(date(2025, 6, 1))
        assert (it.first, it.last) == (first, last)

    def test_builders_chain(self, halloween):
        it = halloween.iter()
        assert it.at(date(2020, 1, 1)) is it
        assert it.starting_at(date(2020, 1, 1)) is it
        assert it.ending_at(date(2030, 1, 1)) is it


# ── Range edges ───────────────────────────────────────────────────────────────

class TestRangeEdges:

    def test_forward_stops_at_last_representable(self, halloween):
        it = halloween.iter().at(date(9998, 1, 1))
        assert list(it) == [date(9998, 10, 31), date(9999, 10, 31)]

    def test_backward_stops_at_first_representable(self, halloween):
        it = halloween.iter().at(date(3, 1, 1))
        assert list(it.iter_back()) == [date(2, 10, 31), date(1, 10, 31)]

    def test_at_earliest_date(self):
        new_year = DayOfMonth(Month.JANUARY, 1)
        it = HolidayIter(new_year).at(date.min)
        assert next(it) == date.min


# ── Export ────────────────────────────────────────────────────────────────────

class TestExport:

    def test_to_numpy_with_limit(self, thanksgiving):
        it = thanksgiving.iter().at(date(2020, 11, 1))
        result = it.to_numpy(limit=3)
        expected = np.array(["2020-11-26", "2021-11-25", "2022-11-24"], dtype="datetime64[D]")
        np.testing.assert_array_equal(result, expected)

    def test_to_numpy_of_bounded_window(self):
        memorial = NthWeekdayOfMonth(NthWeekday.LAST, Weekday.MONDAY, Month.MAY)
        it = memorial.iter().at(date(2020, 1, 1)).ending_at(date(2022, 1, 1))
        result = it.to_numpy()
        assert result.dtype == np.dtype("datetime64[D]")
        assert list(result) == [np.datetime64("2020-05-25"), np.datetime64("2021-05-31")]

    def test_repr(self, halloween):
        assert "HolidayIter" in repr(halloween.iter())
