"""
Calendar helpers for month-scoped analytics.

Months are zero-based (0 = January) throughout, matching the dashboard
month picker.
"""

from __future__ import annotations

import calendar
from datetime import datetime, tzinfo
from typing import Optional, Tuple

from ..core.constants import MONTHS_PER_YEAR


def to_local(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """
    Return ``value`` on the local calendar.

    Aware datetimes are converted to ``tz`` when one is given. Naive datetimes
    are taken to be local already and returned unchanged.
    """
    if tz is None or value.tzinfo is None:
        return value
    return value.astimezone(tz)


def shift_month(month: int, year: int, months: int) -> Tuple[int, int]:
    index = year * MONTHS_PER_YEAR + month + months
    return index % MONTHS_PER_YEAR, index // MONTHS_PER_YEAR


def previous_month(month: int, year: int) -> Tuple[int, int]:
    return shift_month(month, year, -1)


def next_month(month: int, year: int) -> Tuple[int, int]:
    return shift_month(month, year, 1)


def month_label(month: int, year: int) -> str:
    return f"{calendar.month_name[month + 1]} {year}"


__all__ = ["month_label", "next_month", "previous_month", "shift_month", "to_local"]
