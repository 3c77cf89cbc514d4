from __future__ import annotations

import logging
import re

from yearly.calendar import Holiday, UnknownHolidayError

from . import united_states as us
from . import worldwide as ww

logger = logging.getLogger(__name__)

_APOSTROPHES = re.compile(r"['’]")
_SPACES = re.compile(r"\s+")
_LEADING_ARTICLE = re.compile(r"^the\s+")
_TRAILING_DAY = re.compile(r"\s+day$")

# Keys are already normalized: lower case, no apostrophes, no leading
# "the", no trailing "day".
_NAMES: dict[str, Holiday] = {
    "new years": ww.NEW_YEARS_DAY,
    "st patricks": ww.ST_PATRICKS_DAY,
    "st. patricks": ww.ST_PATRICKS_DAY,
    "saint patricks": ww.ST_PATRICKS_DAY,
    "christmas eve": ww.CHRISTMAS_EVE,
    "christmas": ww.CHRISTMAS,
    "new years eve": ww.NEW_YEARS_EVE,
    "martin luther king jr.": us.MLKJ_DAY,
    "martin luther king jr": us.MLKJ_DAY,
    "mlk": us.MLKJ_DAY,
    "groundhog": us.GROUNDHOG_DAY,
    "superbowl sunday": us.SUPERBOWL_SUNDAY,
    "super bowl sunday": us.SUPERBOWL_SUNDAY,
    "superbowl": us.SUPERBOWL_SUNDAY,
    "super bowl": us.SUPERBOWL_SUNDAY,
    "presidents": us.PRESIDENTS_DAY,
    "valentines": us.VALENTINES_DAY,
    "daylight saving time starts": us.DST_START,
    "april fools": us.APRIL_FOOLS_DAY,
    "kentucky derby": us.KENTUCKY_DERBY,
    "memorial": us.MEMORIAL_DAY,
    "mothers": us.MOTHERS_DAY,
    "flag": us.FLAG_DAY,
    "independence": us.INDEPENDENCE_DAY,
    "july 4th": us.INDEPENDENCE_DAY,
    "july fourth": us.INDEPENDENCE_DAY,
    "fourth of july": us.INDEPENDENCE_DAY,
    "fathers": us.FATHERS_DAY,
    "labor": us.LABOR_DAY,
    "halloween": us.HALLOWEEN,
    "columbus": us.COLUMBUS_DAY,
    "veterans": us.VETERANS_DAY,
    "daylight saving time ends": us.DST_END,
    "thanksgiving": us.THANKSGIVING,
}


def normalize_name(text: str) -> str:
    """
    Canonical lookup form of a holiday name.

    "The Mother's Day" and "mothers" both normalize to "mothers".
    """
    name = _APOSTROPHES.sub("", text.lower())
    name = _SPACES.sub(" ", name).strip()
    name = _LEADING_ARTICLE.sub("", name)
    return _TRAILING_DAY.sub("", name)


def from_name(text: str) -> Holiday:
    """
    Holiday for a free-text name.

    Raises:
        UnknownHolidayError: if the name is not in the catalog.
    """
    key = normalize_name(text)
    try:
        return _NAMES[key]
    except KeyError:
        logger.debug("No holiday named %r (normalized %r).", text, key)
        raise UnknownHolidayError(f"Unknown holiday: {text!r}.") from None
