"""Date-picker behaviour that does not depend on a toolkit.

A widget keeps an input field and a month panel in sync with the selected
value; these helpers decide what it should show without drawing anything.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from calendar_logic import DateValue, DayCell, Origin, build_grid, is_today
from date_range import in_range
from date_text import Valid, format_date, parse_date

logger = logging.getLogger(__name__)


class InputStatus(enum.Enum):
    VALID = "valid"
    INVALID = "invalid"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class InputCheck:
    status: InputStatus
    value: Optional[DateValue] = None


@dataclass(frozen=True)
class CellState:
    cell: DayCell
    selected: bool
    today: bool
    outside_month: bool
    selectable: bool


def check_input(
    text: str,
    min_date: Optional[DateValue] = None,
    max_date: Optional[DateValue] = None,
) -> InputCheck:
    """Classify typed text. Unparseable and out-of-range text are kept apart
    so the widget can style them differently."""
    result = parse_date(text.strip())
    if not isinstance(result, Valid):
        return InputCheck(InputStatus.INVALID)
    if not in_range(result.value, min_date, max_date):
        return InputCheck(InputStatus.OUT_OF_RANGE, result.value)
    return InputCheck(InputStatus.VALID, result.value)


def commit_input(
    text: str,
    current: DateValue,
    min_date: Optional[DateValue] = None,
    max_date: Optional[DateValue] = None,
) -> tuple[DateValue, str]:
    """Apply confirmed input text and return the new (value, text) pair.

    Invalid text is replaced by the current value's text. Out-of-range text
    is left as typed and the value is unchanged.
    """
    check = check_input(text, min_date, max_date)
    if check.status is InputStatus.INVALID:
        logger.debug("Reverting invalid input %r", text)
        return current, format_date(current)
    if check.status is InputStatus.OUT_OF_RANGE:
        logger.debug("Ignoring out-of-range input %r", text)
        return current, text
    logger.debug("Committed %s", format_date(check.value))
    return check.value, format_date(check.value)


def panel_for(value: DateValue) -> tuple[int, int]:
    """Return the (year, month) panel that displays ``value``."""
    return value.year, value.month


def select_cell(
    cell: DayCell,
    min_date: Optional[DateValue] = None,
    max_date: Optional[DateValue] = None,
) -> Optional[DateValue]:
    """Return the date a click on ``cell`` selects, or None if it is out of range."""
    if not in_range(cell, min_date, max_date):
        return None
    return DateValue(cell.year, cell.month, cell.day)


def cell_states(
    year: int,
    month: int,
    selected: Optional[DateValue],
    today: date,
    min_date: Optional[DateValue] = None,
    max_date: Optional[DateValue] = None,
) -> list[CellState]:
    states: list[CellState] = []
    for cell in build_grid(year, month):
        states.append(CellState(
            cell=cell,
            selected=selected is not None and cell == selected,
            today=is_today(today, cell),
            outside_month=cell.origin is not Origin.CURRENT,
            selectable=in_range(cell, min_date, max_date),
        ))
    return states
