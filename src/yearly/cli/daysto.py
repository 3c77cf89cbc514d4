from __future__ import annotations

import argparse
import logging
import sys
from datetime import date, datetime
from typing import Optional, Sequence

from dateutil import parser as date_parser

from yearly.calendar import UnknownHolidayError
from yearly.holidays import ALL_HOLIDAYS, from_name

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="daysto",
        description="Print the number of days until a holiday or a date",
    )
    parser.add_argument(
        "targets",
        nargs="*",
        metavar="TEXT",
        help='Holiday name ("thanksgiving") or date ("2030-01-01", "march 3")',
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the known holidays with their next occurrence and exit",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(log_level)
    root.addHandler(handler)


def days_to(target: date, today: date) -> int:
    return (target - today).days


def describe(text: str, today: date) -> str:
    """
    One "Days until ..." line for ``text``.

    Holiday names are tried first, then free-text dates.  Raises ValueError
    (or OverflowError from the date parser) when neither applies.
    """
    try:
        holiday = from_name(text)
    except UnknownHolidayError:
        pass
    else:
        return f"Days until {holiday}: {days_to(holiday.after(today), today)}"

    default = datetime(today.year, today.month, today.day)
    parsed = date_parser.parse(text, default=default).date()
    logger.debug("Parsed %r as %s.", text, parsed)
    return f"Days until {text}: {days_to(parsed, today)}"


def main(argv: Optional[Sequence[str]] = None, today: Optional[date] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    today = today or date.today()

    if args.list:
        for holiday in ALL_HOLIDAYS:
            print(f"{holiday}: {holiday.after(today)}")
        return 0

    status = 0
    for text in args.targets:
        try:
            print(describe(text, today))
        except (ValueError, OverflowError):
            print(f"Unknown holiday: '{text}'", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
