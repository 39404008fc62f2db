"""Inclusive [min, max] range checks on ``DateValue``.

Dates are compared component by component (year, then month, then day).
"""

from __future__ import annotations

from typing import Optional

from calendar_logic import DateValue


def is_at_least(value: DateValue, bound: DateValue) -> bool:
    """True if ``value`` is on or after ``bound``."""
    if value.year != bound.year:
        return value.year > bound.year
    if value.month != bound.month:
        return value.month > bound.month
    return value.day >= bound.day


def is_at_most(value: DateValue, bound: DateValue) -> bool:
    """True if ``value`` is on or before ``bound``."""
    if value.year != bound.year:
        return value.year < bound.year
    if value.month != bound.month:
        return value.month < bound.month
    return value.day <= bound.day


def in_range(
    value: DateValue,
    min_date: Optional[DateValue] = None,
    max_date: Optional[DateValue] = None,
) -> bool:
    """Return True when ``value`` lies within the inclusive bounds.

    A missing bound leaves that side open. The bounds are checked
    independently, so an inverted pair (min after max) selects nothing.
    """
    if min_date is not None and max_date is not None:
        return is_at_most(value, max_date) and is_at_least(value, min_date)
    if min_date is not None:
        return is_at_least(value, min_date)
    if max_date is not None:
        return is_at_most(value, max_date)
    return True
