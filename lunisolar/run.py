"""
CLI wrapper for the lunisolar conversion.

Usage:
    lunisolar --date YYYY-MM-DD [--time HH:MM] [--utc-offset N] [--language vi|zh|pinyin]
    lunisolar --reverse --date YYYY-MM-DD [--leap] [--utc-offset N]

With --reverse, --date is read as a lunisolar date and the solar date
is printed.
"""

import argparse
import json
import logging
import sys

from lunisolar.converter import lunisolar_to_solar
from lunisolar.localization import LANGUAGES
from lunisolar.lunar_datetime import LunarDateTime


def _parse_date(value: str) -> tuple[int, int, int]:
    """Parse "YYYY-MM-DD" into (day, month, year) without calendar checks."""
    try:
        year, month, day = (int(part) for part in value.split("-"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from None
    return day, month, year


def _parse_time(value: str) -> tuple[int, int]:
    """Parse "HH:MM" into (hour, minute)."""
    parts = value.split(":")
    try:
        hour = int(parts[0])
        minute = int(parts[1]) if len(parts) > 1 else 0
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected HH:MM, got {value!r}") from None
    return hour, minute


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert a solar date to the lunisolar calendar.")
    parser.add_argument("--date", required=True, type=_parse_date, help="Date (YYYY-MM-DD)")
    parser.add_argument("--time", default=(0, 0), type=_parse_time, help="Local time (HH:MM)")
    parser.add_argument("--utc-offset", dest="utc_offset", type=int, default=7,
                        help="Whole hours east of UTC (default: 7)")
    parser.add_argument("--language", default="vi", choices=list(LANGUAGES))
    parser.add_argument("--reverse", action="store_true",
                        help="Read --date as a lunisolar date and print the solar date")
    parser.add_argument("--leap", action="store_true",
                        help="With --reverse: the lunisolar date lies in the leap month")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    day, month, year = args.date

    if args.reverse:
        try:
            solar = lunisolar_to_solar(day, month, args.leap, year, args.utc_offset)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        if solar is None:
            leap = "leap " if args.leap else ""
            print(f"No solar date for {leap}month {month} of lunisolar year {year}", file=sys.stderr)
            return 1
        s_day, s_month, s_year = solar
        result = {"solar": {"date": f"{s_year:04d}-{s_month:02d}-{s_day:02d}",
                            "utc_offset": args.utc_offset}}
    else:
        hour, minute = args.time
        try:
            moment = LunarDateTime.from_solar(day, month, year, hour, minute, args.utc_offset)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        result = moment.to_dict(args.language)

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
