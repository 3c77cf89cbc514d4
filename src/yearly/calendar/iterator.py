from __future__ import annotations

import logging
from datetime import date
from itertools import islice
from typing import Iterator, Optional

import numpy as np

from ._exceptions import DateRangeError
from .before_after import BeforeAfterDate, pred, succ

logger = logging.getLogger(__name__)


class HolidayIter:
    """
    Bidirectional cursor over the occurrences of an annually repeating date.

    The window [first, last] defaults to the representable date range and
    can be narrowed or moved with at(), starting_at() and ending_at(), each
    of which returns the iterator for chaining::

        it = THANKSGIVING.iter().at(date(2020, 11, 1))
        next(it)          # 2020-11-26
        next(it)          # 2021-11-25
        it.next_back()    # 2020-11-26

    Forward and backward steps share one cursor.  An instance holds mutable
    state and must not be shared between threads.
    """

    def __init__(self, holiday: BeforeAfterDate) -> None:
        self._holiday = holiday
        self._first: date = holiday.first_date()
        self._last: date = holiday.last_date()
        # None: positioned ahead of the window, nothing consumed yet.
        self._current: Optional[date] = None

    # ── configuration ────────────────────────────────────────────────────

    def at(self, current: date) -> HolidayIter:
        """Position the cursor so the next forward step yields the occurrence on or after ``current``."""
        try:
            self._current = pred(current)
        except DateRangeError:
            self._current = None
        self.shift_from(current)
        return self

    def starting_at(self, start: date) -> HolidayIter:
        """Make the occurrence on or after ``start`` the first of the window."""
        self._first = self._holiday.after(start)
        if start > self._last:
            self._last = start
        return self

    def ending_at(self, end: date) -> HolidayIter:
        """Make the occurrence strictly before ``end`` the last of the window."""
        self._last = self._holiday.before(end)
        if end < self._first:
            self._first = end
        return self

    def shift_from(self, d: date) -> None:
        """Widen [first, last] so that it contains ``d``."""
        if d < self._first:
            self._first = d
        if d > self._last:
            self._last = d

    # ── stepping ─────────────────────────────────────────────────────────

    def __iter__(self) -> HolidayIter:
        return self

    def __next__(self) -> date:
        try:
            start = self._first if self._current is None else succ(self._current)
            found = self._holiday.after(start)
        except DateRangeError:
            logger.debug("Forward iteration of %r ran off the date range.", self._holiday)
            raise StopIteration from None

        if found > self._last:
            raise StopIteration
        self._current = found
        return found

    def next_back(self) -> date:
        """Step backward; raises StopIteration once the cursor is ahead of ``first``."""
        if self._current is None or self._current < self._first:
            raise StopIteration
        try:
            found = self._holiday.before(self._current)
        except DateRangeError:
            logger.debug("Backward iteration of %r ran off the date range.", self._holiday)
            raise StopIteration from None

        self._current = found
        return found

    def iter_back(self) -> Iterator[date]:
        while True:
            try:
                yield self.next_back()
            except StopIteration:
                return

    def to_numpy(self, limit: Optional[int] = None) -> np.ndarray:
        """Collect the remaining forward occurrences as ``datetime64[D]``."""
        return np.array(list(islice(self, limit)), dtype="datetime64[D]")

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def first(self) -> date:
        return self._first

    @property
    def last(self) -> date:
        return self._last

    @property
    def current(self) -> Optional[date]:
        return self._current

    def __repr__(self) -> str:
        return (
            f"HolidayIter(holiday={self._holiday!r}, "
            f"first={self._first}, last={self._last}, current={self._current})"
        )
