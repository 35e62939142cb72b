"""
Domain month filter utilities (pure).

A month filter restricts transactions to those whose sale date falls in a given
calendar month, independent of year. The ALL_MONTHS sentinel disables the
restriction.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .errors import InvalidMonth

# Sentinel meaning "do not filter by month".
ALL_MONTHS: Optional[int] = None


def require_month(month: Optional[int]) -> Optional[int]:
    """
    Validate a month filter value.

    Accepts an integer 1..12 or the ALL_MONTHS sentinel and returns it unchanged.
    Raises InvalidMonth for anything else (including booleans).
    """

    if month is ALL_MONTHS:
        return month
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidMonth(month)
    if not 1 <= month <= 12:
        raise InvalidMonth(month)
    return month


def month_matches(value: datetime, month: Optional[int]) -> bool:
    """True if `value` falls in `month` (any year), or if month is ALL_MONTHS."""

    if month is ALL_MONTHS:
        return True
    return value.month == month
