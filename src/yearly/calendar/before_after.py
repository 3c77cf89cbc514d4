from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import TYPE_CHECKING, Union

import numpy as np

from ._exceptions import DateRangeError, NeverOccursError

if TYPE_CHECKING:
    from .pattern import DayOfMonth, NthWeekdayOfMonth

YearLike = Union[int, "np.ndarray"]

# Upper bound on search steps.  Feb 29 can be eight years apart (1896 → 1904),
# so nine years of days covers every pattern that can occur at all.
MAX_SCAN_DAYS: int = 366 * 9

_ONE_DAY = timedelta(days=1)


# ── day stepping ─────────────────────────────────────────────────────────────

def succ(d: date) -> date:
    try:
        return d + _ONE_DAY
    except OverflowError:
        raise DateRangeError(f"No representable date after {d}.") from None


def pred(d: date) -> date:
    try:
        return d - _ONE_DAY
    except OverflowError:
        raise DateRangeError(f"No representable date before {d}.") from None


def _month_start(year: int, month: int) -> date:
    if not MINYEAR <= year <= MAXYEAR:
        raise DateRangeError(f"Year {year} is outside {MINYEAR}..{MAXYEAR}.")
    return date(year, month, 1)


# ── month helpers ────────────────────────────────────────────────────────────

def first_day_of_month(d: date) -> date:
    return d.replace(day=1)


def last_day_of_month(d: date) -> date:
    """Day before the first of the following month."""
    if d.month == 12:
        if d.year == MAXYEAR:
            return date(MAXYEAR, 12, 31)
        return date(d.year + 1, 1, 1) - _ONE_DAY
    return date(d.year, d.month + 1, 1) - _ONE_DAY


def is_last_weekday(d: date) -> bool:
    """True when no later day in the same month falls on the same weekday."""
    try:
        return (d + timedelta(days=7)).month != d.month
    except OverflowError:
        return True


def nth_of_month(d: date) -> int:
    """How many times d's weekday has occurred in its month up to and including d."""
    return (d.day - 1) // 7 + 1


# ── successor / predecessor ──────────────────────────────────────────────────

def day_of_month_after(pattern: DayOfMonth, d: date) -> date:
    check = d
    for _ in range(MAX_SCAN_DAYS):
        if pattern.matches(check):
            return check
        check = succ(check)
    raise NeverOccursError(f"{pattern!r} does not occur within {MAX_SCAN_DAYS} days of {d}.")


def day_of_month_before(pattern: DayOfMonth, d: date) -> date:
    check = pred(d)
    for _ in range(MAX_SCAN_DAYS):
        if pattern.matches(check):
            return check
        check = pred(check)
    raise NeverOccursError(f"{pattern!r} does not occur within {MAX_SCAN_DAYS} days before {d}.")


def nth_weekday_after(pattern: NthWeekdayOfMonth, d: date) -> date:
    target = int(pattern.month)
    check = d
    for _ in range(MAX_SCAN_DAYS):
        if pattern.matches(check):
            return check
        if check.month < target:
            check = _month_start(check.year, target)
        elif check.month > target:
            check = _month_start(check.year + 1, target)
        else:
            check = succ(check)
    raise NeverOccursError(f"{pattern!r} does not occur within {MAX_SCAN_DAYS} steps of {d}.")


def nth_weekday_before(pattern: NthWeekdayOfMonth, d: date) -> date:
    target = int(pattern.month)
    check = pred(d)
    for _ in range(MAX_SCAN_DAYS):
        if pattern.matches(check):
            return check
        if check.month > target:
            check = last_day_of_month(_month_start(check.year, target))
        elif check.month < target:
            check = last_day_of_month(_month_start(check.year - 1, target))
        else:
            check = pred(check)
    raise NeverOccursError(f"{pattern!r} does not occur within {MAX_SCAN_DAYS} steps before {d}.")


class BeforeAfterDate(ABC):
    """
    Successor / predecessor interface shared by every annually repeating date.

    Subclasses implement after() (inclusive of the reference date) and
    before() (exclusive); everything else is derived from those two.
    """

    @abstractmethod
    def after(self, d: date) -> date:
        ...

    @abstractmethod
    def before(self, d: date) -> date:
        ...

    def after_today(self) -> date:
        return self.after(date.today())

    def before_today(self) -> date:
        return self.before(date.today())

    def first_date(self) -> date:
        """Earliest representable occurrence."""
        return self.after(date.min)

    def last_date(self) -> date:
        """Latest representable occurrence."""
        return self.before(date.max)

    def in_year(self, year: YearLike) -> date | np.ndarray:
        """
        Occurrence on or after January 1 of ``year``.

        An array of years gives a ``datetime64[D]`` array of the same shape.
        """
        if np.ndim(year) == 0:
            return self.after(_month_start(int(year), 1))

        years = np.asarray(year, dtype=np.int64)
        found = [self.after(_month_start(int(y), 1)) for y in years.ravel()]
        return np.array(found, dtype="datetime64[D]").reshape(years.shape)
