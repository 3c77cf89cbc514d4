"""
yearly.calendar
~~~~~~~~~~~~~~~

Annually repeating dates.  A pattern is either a fixed day of the month
("October 31") or the nth weekday of a month ("4th Thursday in November");
either can be resolved against any reference date to its next or previous
occurrence, compared against concrete dates, and enumerated in both
directions.

Basic usage::

    from datetime import date
    from yearly.calendar import Holiday, NthWeekday, Weekday, Month

    tgives = Holiday.new_nth("Thanksgiving", NthWeekday.FOURTH,
                             Weekday.THURSDAY, Month.NOVEMBER)
    tgives.after(date(2020, 11, 1))     # → date(2020, 11, 26)
    tgives.before(date(2020, 11, 26))   # → date(2019, 11, 28)
    tgives == date(2021, 11, 25)        # → True

NumPy arrays of years are accepted by ``in_year``::

    import numpy as np
    tgives.in_year(np.array([2020, 2021]))   # datetime64[D] array

Iteration::

    it = tgives.iter().at(date(2020, 11, 1))
    next(it)          # → date(2020, 11, 26)
    it.next_back()    # → date(2019, 11, 28)

Public API
----------
DayOfMonth          Fixed date pattern.
NthWeekdayOfMonth   Nth (or last) weekday of a month pattern.
Holiday             A pattern with a display name.
HolidayIter         Windowed bidirectional iterator over occurrences.
CalendarError       Base exception for all calendar-related errors.
"""

from __future__ import annotations

from yearly.calendar._exceptions import (
    CalendarError,
    DateRangeError,
    InvalidPatternError,
    NeverOccursError,
    UnknownHolidayError,
)
from yearly.calendar.before_after import (
    BeforeAfterDate,
    first_day_of_month,
    is_last_weekday,
    last_day_of_month,
)
from yearly.calendar.enums import Month, NthWeekday, Weekday
from yearly.calendar.iterator import HolidayIter
from yearly.calendar.pattern import (
    AnnualDate,
    DayOfMonth,
    Holiday,
    HolidayDate,
    NthWeekdayOfMonth,
)

__all__ = [
    "AnnualDate",
    "BeforeAfterDate",
    "CalendarError",
    "DateRangeError",
    "DayOfMonth",
    "Holiday",
    "HolidayDate",
    "HolidayIter",
    "InvalidPatternError",
    "Month",
    "NeverOccursError",
    "NthWeekday",
    "NthWeekdayOfMonth",
    "UnknownHolidayError",
    "Weekday",
    "first_day_of_month",
    "is_last_weekday",
    "last_day_of_month",
]
