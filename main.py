"""Entry point — prints month grids and checks typed dates from the shell."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import Optional, Sequence

from calendar_logic import (
    DAY_ABBR,
    MONTH_ABBR,
    DateValue,
    Origin,
    build_grid,
    grid_rows,
    iso_week_numbers,
    next_month,
    next_year,
    prev_month,
    prev_year,
)
from date_text import Valid, format_date, parse_date
from picker_logic import InputStatus, check_input, panel_for
from settings import load_settings

logger = logging.getLogger(__name__)

# argparse already owns exit code 2 for usage errors
EXIT_CODES = {
    InputStatus.VALID: 0,
    InputStatus.INVALID: 1,
    InputStatus.OUT_OF_RANGE: 3,
}

MOVES = {
    "prev-month": prev_month,
    "next-month": next_month,
    "prev-year": prev_year,
    "next-year": next_year,
}


def _date_arg(text: str):
    result = parse_date(text)
    if not isinstance(result, Valid):
        raise argparse.ArgumentTypeError(f"{text!r} is not a DD-MM-YYYY date")
    return result.value


def _month_arg(text: str) -> int:
    month = int(text)
    if not 1 <= month <= 12:
        raise argparse.ArgumentTypeError(f"month must be 1..12, got {month}")
    return month - 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mini-date-picker",
                                     description="Month grids and DD-MM-YYYY date checks")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--settings", help="settings file providing bounds and the initial date")
    sub = parser.add_subparsers(dest="command", required=True)

    grid = sub.add_parser("grid", help="print the 6-week grid for a month")
    grid.add_argument("year", type=int, nargs="?",
                      help="defaults to the initial date setting, then today")
    grid.add_argument("month", type=_month_arg, nargs="?", help="1..12")
    grid.add_argument("--move", action="append", choices=sorted(MOVES), default=[],
                      help="step the panel before printing (repeatable)")

    check = sub.add_parser("check", help="validate typed date text")
    check.add_argument("text")
    check.add_argument("--min", dest="min_date", type=_date_arg)
    check.add_argument("--max", dest="max_date", type=_date_arg)
    return parser


def print_grid(year: int, month: int) -> None:
    print(f"{MONTH_ABBR[month]} {year}")
    print("Wk  " + " ".join(f"{abbr:<11}" for abbr in DAY_ABBR).rstrip())
    weeks = iso_week_numbers(year, month)
    for week, row in zip(weeks, grid_rows(build_grid(year, month))):
        # non-current cells carry a trailing '*'
        cells = [
            format_date(cell) + (" " if cell.origin is Origin.CURRENT else "*")
            for cell in row
        ]
        print(f"{week:>2}  " + " ".join(cells).rstrip())


def _initial_panel(args: argparse.Namespace, settings: Optional[dict]) -> tuple[int, int]:
    if args.year is not None:
        return args.year, args.month
    if settings and settings["initial_date"] is not None:
        return panel_for(settings["initial_date"])
    return panel_for(DateValue.from_date(date.today()))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings(args.settings) if args.settings else None

    if args.command == "grid":
        if (args.year is None) != (args.month is None):
            parser.error("grid takes both YEAR and MONTH, or neither")
        year, month = _initial_panel(args, settings)
        for move in args.move:
            year, month = MOVES[move](year, month)
        logger.debug("Printing panel %d-%02d", year, month + 1)
        print_grid(year, month)
        return 0

    min_date, max_date = args.min_date, args.max_date
    if settings:
        if min_date is None:
            min_date = settings["min_date"]
        if max_date is None:
            max_date = settings["max_date"]
    logger.debug("Checking %r against min=%s max=%s", args.text, min_date, max_date)

    check = check_input(args.text, min_date, max_date)
    print(check.status.value)
    return EXIT_CODES[check.status]


if __name__ == "__main__":
    sys.exit(main())
