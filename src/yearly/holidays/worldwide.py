"""Holidays observed on the same day in most of the world."""

from __future__ import annotations

from yearly.calendar import Holiday, Month

NEW_YEARS_DAY = Holiday.new_fixed("New Year's Day", Month.JANUARY, 1)
ST_PATRICKS_DAY = Holiday.new_fixed("St. Patrick's Day", Month.MARCH, 17)
CHRISTMAS_EVE = Holiday.new_fixed("Christmas Eve", Month.DECEMBER, 24)
CHRISTMAS = Holiday.new_fixed("Christmas", Month.DECEMBER, 25)
NEW_YEARS_EVE = Holiday.new_fixed("New Year's Eve", Month.DECEMBER, 31)

WORLDWIDE: tuple[Holiday, ...] = (
    NEW_YEARS_DAY,
    ST_PATRICKS_DAY,
    CHRISTMAS_EVE,
    CHRISTMAS,
    NEW_YEARS_EVE,
)
