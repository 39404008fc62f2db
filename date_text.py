"""Conversion between ``DateValue`` and the ``DD-MM-YYYY`` input text.

Typed text is routine input, so parsing reports failure as an ``Invalid``
result instead of raising.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Union

from calendar_logic import DateValue, days_in_month

DATE_TEXT_RE = re.compile(r"(\d{2})-(\d{2})-(\d{4})", re.ASCII)


class InvalidReason(enum.Enum):
    MALFORMED = "malformed"
    MONTH_OUT_OF_RANGE = "month_out_of_range"
    DAY_OUT_OF_RANGE = "day_out_of_range"


@dataclass(frozen=True)
class Valid:
    value: DateValue

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    reason: InvalidReason
    text: str

    def __bool__(self) -> bool:
        return False


ParseResult = Union[Valid, Invalid]


def format_date(value: DateValue) -> str:
    """Render ``value`` as ``DD-MM-YYYY``, zero-padding every field.

    Only years 0..9999 fit the four-digit field. Grid cells past that
    (January 10000 after December 9999, or negative years) render wider
    or signed, and ``parse_date`` reports such text as malformed.
    """
    return f"{value.day:02d}-{value.month + 1:02d}-{value.year:04d}"


def parse_date(text: str) -> ParseResult:
    """Parse ``DD-MM-YYYY`` text, checking the day against the real month length."""
    match = DATE_TEXT_RE.fullmatch(text)
    if match is None:
        return Invalid(InvalidReason.MALFORMED, text)

    day, month, year = (int(part) for part in match.groups())
    if not 1 <= month <= 12:
        return Invalid(InvalidReason.MONTH_OUT_OF_RANGE, text)
    if day < 1 or day > days_in_month(year, month - 1):
        return Invalid(InvalidReason.DAY_OUT_OF_RANGE, text)

    return Valid(DateValue(year, month - 1, day))
