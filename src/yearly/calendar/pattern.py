from __future__ import annotations

import operator
from abc import abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Any, Union

from . import before_after as _ba
from . import compare as _cmp
from ._exceptions import InvalidPatternError
from .before_after import BeforeAfterDate
from .enums import Month, NthWeekday, Weekday
from .iterator import HolidayIter


class AnnualDate(BeforeAfterDate):
    """
    Base class of the two annually repeating date variants.

    Comparing with ``==`` against a ``datetime.date`` asks whether the date is
    an occurrence; against another pattern it is structural.  Ordering between
    patterns is by month, with fixed dates ahead of nth-weekday dates in the
    same month.  Ordering against a date compares the pattern's occurrence in
    that date's year.

    The hash follows the structural key, so it does not track the hash of
    a matching ``datetime.date``: ``date(2020, 10, 31) in {DayOfMonth(10, 31)}``
    is False even though the two compare equal.  Test membership with ``==``.
    """

    @abstractmethod
    def matches(self, d: date) -> bool:
        ...

    @abstractmethod
    def sort_key(self) -> _cmp.SortKey:
        ...

    def iter(self) -> HolidayIter:
        return HolidayIter(self)

    # ── comparison ───────────────────────────────────────────────────────

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, date):
            return self.matches(other)
        if isinstance(other, AnnualDate):
            return self.sort_key() == other.sort_key()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.sort_key())

    def _ordering(self, other: Any) -> tuple[Any, Any] | None:
        if isinstance(other, AnnualDate):
            return self.sort_key(), other.sort_key()
        if isinstance(other, date):
            return self.in_year(other.year), other
        return None

    def __lt__(self, other: Any) -> bool:
        pair = self._ordering(other)
        return NotImplemented if pair is None else pair[0] < pair[1]

    def __le__(self, other: Any) -> bool:
        pair = self._ordering(other)
        return NotImplemented if pair is None else pair[0] <= pair[1]

    def __gt__(self, other: Any) -> bool:
        pair = self._ordering(other)
        return NotImplemented if pair is None else pair[0] > pair[1]

    def __ge__(self, other: Any) -> bool:
        pair = self._ordering(other)
        return NotImplemented if pair is None else pair[0] >= pair[1]


@dataclass(frozen=True, eq=False)
class DayOfMonth(AnnualDate):
    """A fixed day of the month, e.g. October 31."""

    month: Month
    day: int

    def __post_init__(self) -> None:
        month = Month.of(self.month)
        try:
            day = operator.index(self.day)
        except TypeError:
            raise InvalidPatternError(f"Day must be an integer; got {self.day!r}.") from None
        if not 1 <= day <= month.max_days:
            raise InvalidPatternError(
                f"Day {self.day} never occurs in {month.name.title()}."
            )
        object.__setattr__(self, "month", month)
        object.__setattr__(self, "day", day)

    def matches(self, d: date) -> bool:
        return _cmp.day_of_month_matches(self, d)

    def sort_key(self) -> _cmp.SortKey:
        return _cmp.day_of_month_key(self)

    def after(self, d: date) -> date:
        return _ba.day_of_month_after(self, d)

    def before(self, d: date) -> date:
        return _ba.day_of_month_before(self, d)

    def __repr__(self) -> str:
        return f"DayOfMonth(month={self.month.name}, day={self.day})"


@dataclass(frozen=True, eq=False)
class NthWeekdayOfMonth(AnnualDate):
    """The nth (or last) weekday of a month, e.g. the 4th Thursday in November."""

    nth: NthWeekday
    weekday: Weekday
    month: Month

    def __post_init__(self) -> None:
        object.__setattr__(self, "nth", NthWeekday.of(self.nth))
        object.__setattr__(self, "weekday", Weekday.of(self.weekday))
        object.__setattr__(self, "month", Month.of(self.month))

    @classmethod
    def from_date(cls, d: date) -> NthWeekdayOfMonth:
        """
        The pattern ``d`` is an occurrence of, by numeric rank.

        Never yields ``LAST``: the final Tuesday of a month with four
        Tuesdays comes back as ``FOURTH``.
        """
        return cls(_ba.nth_of_month(d), Weekday(d.weekday()), Month(d.month))

    def matches(self, d: date) -> bool:
        return _cmp.nth_weekday_matches(self, d)

    def sort_key(self) -> _cmp.SortKey:
        return _cmp.nth_weekday_key(self)

    def after(self, d: date) -> date:
        return _ba.nth_weekday_after(self, d)

    def before(self, d: date) -> date:
        return _ba.nth_weekday_before(self, d)

    def __repr__(self) -> str:
        return (
            f"NthWeekdayOfMonth(nth={self.nth.name}, "
            f"weekday={self.weekday.name}, month={self.month.name})"
        )


HolidayDate = Union[DayOfMonth, NthWeekdayOfMonth]


@dataclass(frozen=True, eq=False)
class Holiday(BeforeAfterDate):
    """
    An annually repeating date with a display name.

    Two holidays are equal when both their patterns and the text of their
    names are equal.  A holiday also compares equal to a ``datetime.date``
    that is one of its occurrences, and to its bare pattern.  As with
    ``AnnualDate``, hashing uses the pattern and name only, so a set of
    holidays does not find a matching ``datetime.date``.
    """

    name: Any
    pattern: HolidayDate

    @classmethod
    def new_fixed(cls, name: Any, month: int | Month, day: int) -> Holiday:
        return cls(name, DayOfMonth(month, day))

    @classmethod
    def new_nth(
        cls,
        name: Any,
        nth: int | NthWeekday,
        weekday: int | Weekday,
        month: int | Month,
    ) -> Holiday:
        return cls(name, NthWeekdayOfMonth(nth, weekday, month))

    def matches(self, d: date) -> bool:
        return self.pattern.matches(d)

    def after(self, d: date) -> date:
        return self.pattern.after(d)

    def before(self, d: date) -> date:
        return self.pattern.before(d)

    def iter(self) -> HolidayIter:
        return HolidayIter(self)

    def sort_key(self) -> tuple[_cmp.SortKey, str]:
        return self.pattern.sort_key(), str(self.name)

    # ── comparison ───────────────────────────────────────────────────────

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Holiday):
            return self.sort_key() == other.sort_key()
        if isinstance(other, (date, AnnualDate)):
            return self.pattern == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.sort_key())

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Holiday):
            return self.sort_key() < other.sort_key()
        return self.pattern.__lt__(other)

    def __le__(self, other: Any) -> bool:
        if isinstance(other, Holiday):
            return self.sort_key() <= other.sort_key()
        return self.pattern.__le__(other)

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, Holiday):
            return self.sort_key() > other.sort_key()
        return self.pattern.__gt__(other)

    def __ge__(self, other: Any) -> bool:
        if isinstance(other, Holiday):
            return self.sort_key() >= other.sort_key()
        return self.pattern.__ge__(other)

    def __str__(self) -> str:
        return str(self.name)

    def __repr__(self) -> str:
        return f"Holiday(name={str(self.name)!r}, pattern={self.pattern!r})"

    # Declared last: the name shadows datetime.date inside the class body.
    @property
    def date(self) -> HolidayDate:
        """The holiday's pattern; an alias of ``pattern``."""
        return self.pattern
