from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Tuple


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def days_in_month(year: int, month: int) -> int:
    """Number of calendar days in ``month`` (1-12), leap years included."""
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last day of the month."""
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    """Move ``offset`` months forward (negative goes back)."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1
