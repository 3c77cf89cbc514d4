"""
yearly.holidays
~~~~~~~~~~~~~~~

A catalog of named holidays built on :mod:`yearly.calendar`, with lookup by
free-text name.

Basic usage::

    from yearly.holidays import THANKSGIVING, from_name

    THANKSGIVING.in_year(2020)           # → date(2020, 11, 26)
    from_name("the Fourth of July")      # → INDEPENDENCE_DAY

Public API
----------
ALL_HOLIDAYS   Every holiday in the catalog, sorted.
from_name      Name → Holiday; raises UnknownHolidayError on a miss.
"""

from __future__ import annotations

from yearly.holidays.lookup import from_name, normalize_name
from yearly.holidays.united_states import (
    APRIL_FOOLS_DAY,
    COLUMBUS_DAY,
    DST_END,
    DST_START,
    FATHERS_DAY,
    FLAG_DAY,
    GROUNDHOG_DAY,
    HALLOWEEN,
    INDEPENDENCE_DAY,
    KENTUCKY_DERBY,
    LABOR_DAY,
    MEMORIAL_DAY,
    MLKJ_DAY,
    MOTHERS_DAY,
    PRESIDENTS_DAY,
    SUPERBOWL_SUNDAY,
    THANKSGIVING,
    UNITED_STATES,
    VALENTINES_DAY,
    VETERANS_DAY,
)
from yearly.holidays.worldwide import (
    CHRISTMAS,
    CHRISTMAS_EVE,
    NEW_YEARS_DAY,
    NEW_YEARS_EVE,
    ST_PATRICKS_DAY,
    WORLDWIDE,
)

ALL_HOLIDAYS = tuple(sorted(WORLDWIDE + UNITED_STATES))

__all__ = [
    "ALL_HOLIDAYS",
    "APRIL_FOOLS_DAY",
    "CHRISTMAS",
    "CHRISTMAS_EVE",
    "COLUMBUS_DAY",
    "DST_END",
    "DST_START",
    "FATHERS_DAY",
    "FLAG_DAY",
    "GROUNDHOG_DAY",
    "HALLOWEEN",
    "INDEPENDENCE_DAY",
    "KENTUCKY_DERBY",
    "LABOR_DAY",
    "MEMORIAL_DAY",
    "MLKJ_DAY",
    "MOTHERS_DAY",
    "NEW_YEARS_DAY",
    "NEW_YEARS_EVE",
    "PRESIDENTS_DAY",
    "ST_PATRICKS_DAY",
    "SUPERBOWL_SUNDAY",
    "THANKSGIVING",
    "UNITED_STATES",
    "VALENTINES_DAY",
    "VETERANS_DAY",
    "WORLDWIDE",
    "from_name",
    "normalize_name",
]
