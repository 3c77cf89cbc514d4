from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from .before_after import is_last_weekday, nth_of_month
from .enums import NthWeekday

if TYPE_CHECKING:
    from .pattern import DayOfMonth, NthWeekdayOfMonth

SortKey = tuple[int, int, int, int]

# Within a month every fixed date sorts ahead of every nth-weekday date.
_FIXED_RANK = 0
_NTH_RANK = 1


# ── pattern vs. concrete date ────────────────────────────────────────────────

def day_of_month_matches(pattern: DayOfMonth, d: date) -> bool:
    return d.month == pattern.month and d.day == pattern.day


def nth_weekday_matches(pattern: NthWeekdayOfMonth, d: date) -> bool:
    if d.month != pattern.month or d.weekday() != pattern.weekday:
        return False
    if pattern.nth is NthWeekday.LAST:
        return is_last_weekday(d)
    return nth_of_month(d) == pattern.nth


# ── pattern vs. pattern ──────────────────────────────────────────────────────

def day_of_month_key(pattern: DayOfMonth) -> SortKey:
    return (int(pattern.month), _FIXED_RANK, pattern.day, 0)


def nth_weekday_key(pattern: NthWeekdayOfMonth) -> SortKey:
    return (
        int(pattern.month),
        _NTH_RANK,
        int(pattern.nth),
        pattern.weekday.num_days_from_sunday,
    )
