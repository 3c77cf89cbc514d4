from __future__ import annotations

import operator
from enum import IntEnum

from ._exceptions import InvalidPatternError


class Month(IntEnum):
    """Calendar month, January = 1."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, value: int | Month) -> Month:
        try:
            return cls(operator.index(value))
        except (TypeError, ValueError):
            raise InvalidPatternError(f"Invalid month: {value!r}.") from None

    def from_zero(self) -> int:
        """The month as an index where January = 0."""
        return int(self) - 1

    @property
    def max_days(self) -> int:
        """Longest this month can be in any year (February counts 29)."""
        if self is Month.FEBRUARY:
            return 29
        if self in (Month.APRIL, Month.JUNE, Month.SEPTEMBER, Month.NOVEMBER):
            return 30
        return 31


class Weekday(IntEnum):
    """Day of the week, numbered like ``datetime.date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def of(cls, value: int | Weekday) -> Weekday:
        try:
            return cls(operator.index(value))
        except (TypeError, ValueError):
            raise InvalidPatternError(f"Invalid weekday: {value!r}.") from None

    @property
    def num_days_from_sunday(self) -> int:
        return (int(self) + 1) % 7


class NthWeekday(IntEnum):
    """
    The nth occurrence of a weekday in a month.

    ``FIFTH`` only exists in some months; resolving it carries the search
    forward to the next year that has one.  ``LAST`` always matches once.
    """

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5
    LAST = 6

    @classmethod
    def of(cls, value: int | NthWeekday) -> NthWeekday:
        """Any rank above five collapses to ``LAST``; zero is rejected."""
        if isinstance(value, NthWeekday):
            return value
        try:
            n = operator.index(value)
        except TypeError:
            raise InvalidPatternError(f"Ordinal must be an integer; got {value!r}.") from None
        if n <= 0:
            raise InvalidPatternError(f"Ordinal must be positive; got {value!r}.")
        return cls(min(n, cls.LAST))
