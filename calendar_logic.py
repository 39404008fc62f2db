"""Pure calendar calculations — no UI dependencies.

Months are zero-based throughout (January = 0, December = 11).
"""

from __future__ import annotations

import calendar
import enum
from dataclasses import dataclass, field
from datetime import date

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

VISIBLE_CELLS = 7 * 6

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Sakamoto month offsets, January first
_MONTH_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)

# Sunday-first numbering (Sunday = 0) -> Monday-first column index
_SUNDAY_FIRST_TO_MONDAY_FIRST = {
    0: 6,
    1: 0,
    2: 1,
    3: 2,
    4: 3,
    5: 4,
    6: 5,
}


class Origin(str, enum.Enum):
    """Which month a grid cell belongs to, relative to the displayed panel."""

    PREVIOUS = "previous"
    CURRENT = "current"
    NEXT = "next"


@dataclass(frozen=True, eq=False)
class DateValue:
    """A calendar date with a zero-based month. No time-of-day."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 0 <= self.month <= 11:
            raise ValueError(f"month must be in 0..11, got {self.month}")
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise ValueError(
                f"day {self.day} out of range for {self.year}-{self.month + 1:02d}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateValue):
            return NotImplemented
        return (self.year, self.month, self.day) == (other.year, other.month, other.day)

    def __hash__(self) -> int:
        return hash((self.year, self.month, self.day))

    @classmethod
    def from_date(cls, d: date) -> "DateValue":
        """Build from a ``date`` or ``datetime``; any time-of-day is dropped."""
        return cls(d.year, d.month - 1, d.day)

    def to_date(self) -> date:
        """Return a ``datetime.date``; only years 1..9999 are representable."""
        return date(self.year, self.month + 1, self.day)


@dataclass(frozen=True, eq=False)
class DayCell(DateValue):
    """One grid entry. ``origin`` does not take part in equality."""

    origin: Origin = field(default=Origin.CURRENT)


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``.

    ``month`` may fall outside 0..11; it is rolled into the neighbouring
    year first, so ``days_in_month(2024, -1)`` is December 2023.
    """
    year_shift, month = divmod(month, 12)
    year += year_shift
    if month == 1 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month]


def weekday(year: int, month: int, day: int) -> int:
    """Monday-first weekday (Monday = 0 … Sunday = 6) of any proleptic
    Gregorian date, including years below 1 and above 9999."""
    if month < 2:
        year -= 1
    sunday_first = (year + year // 4 - year // 100 + year // 400
                    + _MONTH_OFFSETS[month] + day) % 7
    return _SUNDAY_FIRST_TO_MONDAY_FIRST[sunday_first]


def first_weekday(year: int, month: int) -> int:
    """Monday-first weekday of day 1 of the month."""
    return weekday(year, month, 1)


def day_of_year(value: DateValue) -> int:
    """Return the 1-based day-of-year for the given date."""
    return sum(days_in_month(value.year, m) for m in range(value.month)) + value.day


def _iso_weeks_in_year(year: int) -> int:
    jan1 = weekday(year, 0, 1)
    if jan1 == 3 or (jan1 == 2 and is_leap_year(year)):
        return 53
    return 52


def iso_week(value: DateValue) -> int:
    """ISO 8601 week number of ``value``."""
    week = (day_of_year(value) - weekday(value.year, value.month, value.day) + 9) // 7
    if week < 1:
        return _iso_weeks_in_year(value.year - 1)
    if week > _iso_weeks_in_year(value.year):
        return 1
    return week


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 0:
        return year - 1, 11
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 11:
        return year + 1, 0
    return year, month + 1


def prev_year(year: int, month: int) -> tuple[int, int]:
    return year - 1, month


def next_year(year: int, month: int) -> tuple[int, int]:
    return year + 1, month


def previous_month_days(year: int, month: int) -> list[DayCell]:
    """Trailing days of the prior month that fill the first grid row."""
    count = first_weekday(year, month)
    cell_year, cell_month = prev_month(year, month)
    last_day = days_in_month(year, month - 1)
    return [
        DayCell(cell_year, cell_month, day, Origin.PREVIOUS)
        for day in range(last_day - count + 1, last_day + 1)
    ]


def current_month_days(year: int, month: int) -> list[DayCell]:
    return [
        DayCell(year, month, day, Origin.CURRENT)
        for day in range(1, days_in_month(year, month) + 1)
    ]


def next_month_days(year: int, month: int) -> list[DayCell]:
    """Leading days of the following month that pad the grid to 42 cells."""
    count = VISIBLE_CELLS - days_in_month(year, month) - first_weekday(year, month)
    cell_year, cell_month = next_month(year, month)
    return [
        DayCell(cell_year, cell_month, day, Origin.NEXT)
        for day in range(1, count + 1)
    ]


def build_grid(year: int, month: int) -> list[DayCell]:
    """Return the 42 cells (6 weeks, Monday first) shown for a month panel.

    Always 6 rows so the calendar height stays constant, even for a
    28-day February starting on a Monday.
    """
    if not 0 <= month <= 11:
        raise ValueError(f"month must be in 0..11, got {month}")
    return (
        previous_month_days(year, month)
        + current_month_days(year, month)
        + next_month_days(year, month)
    )


def grid_rows(cells: list[DayCell]) -> list[list[DayCell]]:
    """Split a flat grid into rows of 7."""
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def iso_week_numbers(year: int, month: int) -> list[int]:
    """Return the ISO week number for each of the 6 grid rows."""
    weeks: list[int] = []
    for row in grid_rows(build_grid(year, month)):
        # every row starts on a Monday, so its first cell names the week
        weeks.append(iso_week(row[0]))
    return weeks


def is_today(today: date, cell: DateValue) -> bool:
    return DateValue.from_date(today) == cell
