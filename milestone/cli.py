"""Command-line entry point.

    milestone next 2020-03-14
    milestone next 2020-03-14 --now 2025-01-01 --base hex --unit day
    milestone patterns 9 99 100 4321 123456
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import parser as date_parser

from milestone.display import format_duration
from milestone.finders import MultiPatternFinder
from milestone.pattern import SUPPORTED_BASES, Base
from milestone.selection import best_milestone
from milestone.units import TimeUnit

logger = logging.getLogger(__name__)


def _parse_date(text: str) -> datetime:
    try:
        return date_parser.parse(text)
    except (ValueError, OverflowError) as exc:
        raise argparse.ArgumentTypeError(f"invalid date {text!r}: {exc}") from None


def _parse_zone(text: str) -> ZoneInfo:
    try:
        return ZoneInfo(text)
    except (ZoneInfoNotFoundError, ValueError):
        raise argparse.ArgumentTypeError(f"unknown time zone {text!r}") from None


def _parse_base(text: str) -> Base:
    try:
        return Base.coerce(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc).replace("\n", "; ")) from None


def _parse_unit(text: str) -> TimeUnit:
    try:
        return TimeUnit.coerce(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc).replace("\n", "; ")) from None


def _parse_count(text: str) -> int:
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"number must be >= 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="milestone",
        description="Find the next notable number of seconds, days, months... "
        "since a date.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log more detail (-v for info, -vv for debug)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    nxt = commands.add_parser("next", help="show the next milestone for a date")
    nxt.add_argument("reference", type=_parse_date, help="reference date")
    nxt.add_argument(
        "--now", type=_parse_date, default=None, help="current date (default: now)"
    )
    nxt.add_argument(
        "--tz",
        type=_parse_zone,
        default=ZoneInfo("UTC"),
        help="IANA time zone for dates without one (default: UTC)",
    )
    nxt.add_argument(
        "--base",
        dest="bases",
        action="append",
        type=_parse_base,
        help="base to search (10/dec, 16/hex); repeatable, default all",
    )
    nxt.add_argument(
        "--unit",
        dest="units",
        action="append",
        type=_parse_unit,
        help="time unit to search; repeatable, default all",
    )

    pats = commands.add_parser("patterns", help="list notable numbers >= N")
    pats.add_argument("numbers", nargs="+", type=_parse_count, metavar="N")
    pats.add_argument(
        "--base",
        dest="bases",
        action="append",
        type=_parse_base,
        help="base to search (10/dec, 16/hex); repeatable, default all",
    )
    return parser


def _localize(value: datetime, zone: ZoneInfo) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=zone)


def run_next(args: argparse.Namespace) -> int:
    reference = _localize(args.reference, args.tz)
    now = datetime.now(args.tz) if args.now is None else _localize(args.now, args.tz)
    units = args.units or tuple(TimeUnit)
    bases = args.bases or SUPPORTED_BASES

    milestone = best_milestone(reference, now, units=units, bases=bases)
    if milestone is None:
        logger.error("no milestone could be computed for %s", reference.isoformat())
        return 1

    print(f"{milestone} on {milestone.target_date.isoformat()}")
    if milestone.target_date >= now:
        distance = (milestone.target_date - now).total_seconds()
        print(f"in {format_duration(distance)}")
    return 0


def run_patterns(args: argparse.Namespace) -> int:
    bases = args.bases or SUPPORTED_BASES
    finder = MultiPatternFinder(bases)
    for n in args.numbers:
        for base in bases:
            for pattern in finder.find_patterns(n, base):
                print(f"{n} -> {pattern}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "next":
        return run_next(args)
    return run_patterns(args)


if __name__ == "__main__":
    sys.exit(main())
