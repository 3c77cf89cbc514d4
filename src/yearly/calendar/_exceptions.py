from __future__ import annotations


class CalendarError(Exception):
    """Base exception for all yearly.calendar errors."""


class InvalidPatternError(CalendarError, ValueError):
    """A month, day or ordinal outside of its allowed range."""


class NeverOccursError(CalendarError):
    """A pattern did not match within the scan limit."""


class DateRangeError(CalendarError, OverflowError):
    """A search stepped outside of the representable date range."""


class UnknownHolidayError(CalendarError, LookupError):
    """A name that does not resolve to a known holiday."""
