"""Holidays in the United States."""

from __future__ import annotations

from yearly.calendar import Holiday, Month, NthWeekday, Weekday

MLKJ_DAY = Holiday.new_nth("Martin Luther King Jr. Day", NthWeekday.THIRD, Weekday.MONDAY, Month.JANUARY)
GROUNDHOG_DAY = Holiday.new_fixed("Groundhog Day", Month.FEBRUARY, 2)
SUPERBOWL_SUNDAY = Holiday.new_nth("Super Bowl Sunday", NthWeekday.FIRST, Weekday.SUNDAY, Month.FEBRUARY)
PRESIDENTS_DAY = Holiday.new_nth("President's Day", NthWeekday.THIRD, Weekday.MONDAY, Month.FEBRUARY)
VALENTINES_DAY = Holiday.new_fixed("Valentine's Day", Month.FEBRUARY, 14)
DST_START = Holiday.new_nth("Daylight Saving Time Starts", NthWeekday.SECOND, Weekday.SUNDAY, Month.MARCH)
APRIL_FOOLS_DAY = Holiday.new_fixed("April Fool's Day", Month.APRIL, 1)
KENTUCKY_DERBY = Holiday.new_nth("Kentucky Derby", NthWeekday.FIRST, Weekday.SATURDAY, Month.MAY)
MEMORIAL_DAY = Holiday.new_nth("Memorial Day", NthWeekday.LAST, Weekday.MONDAY, Month.MAY)
MOTHERS_DAY = Holiday.new_nth("Mother's Day", NthWeekday.SECOND, Weekday.SUNDAY, Month.MAY)
FLAG_DAY = Holiday.new_fixed("Flag Day", Month.JUNE, 14)
INDEPENDENCE_DAY = Holiday.new_fixed("Independence Day", Month.JULY, 4)
FATHERS_DAY = Holiday.new_nth("Father's Day", NthWeekday.THIRD, Weekday.SUNDAY, Month.JUNE)
LABOR_DAY = Holiday.new_nth("Labor Day", NthWeekday.FIRST, Weekday.MONDAY, Month.SEPTEMBER)
HALLOWEEN = Holiday.new_fixed("Halloween", Month.OCTOBER, 31)
COLUMBUS_DAY = Holiday.new_nth("Columbus Day", NthWeekday.SECOND, Weekday.MONDAY, Month.OCTOBER)
VETERANS_DAY = Holiday.new_fixed("Veteran's Day", Month.NOVEMBER, 11)
DST_END = Holiday.new_nth("Daylight Saving Time Ends", NthWeekday.FIRST, Weekday.SUNDAY, Month.NOVEMBER)
THANKSGIVING = Holiday.new_nth("Thanksgiving", NthWeekday.FOURTH, Weekday.THURSDAY, Month.NOVEMBER)

UNITED_STATES: tuple[Holiday, ...] = (
    MLKJ_DAY,
    GROUNDHOG_DAY,
    SUPERBOWL_SUNDAY,
    PRESIDENTS_DAY,
    VALENTINES_DAY,
    DST_START,
    APRIL_FOOLS_DAY,
    KENTUCKY_DERBY,
    MEMORIAL_DAY,
    MOTHERS_DAY,
    FLAG_DAY,
    INDEPENDENCE_DAY,
    FATHERS_DAY,
    LABOR_DAY,
    HALLOWEEN,
    COLUMBUS_DAY,
    VETERANS_DAY,
    DST_END,
    THANKSGIVING,
)
