from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import month_bounds, shift_month
from ..core.enums import PeriodFilter
from ..core.exceptions import ValidationError

_LOOKBACK_MONTHS = {
    PeriodFilter.LAST_1: 1,
    PeriodFilter.LAST_2: 2,
    PeriodFilter.LAST_3: 3,
    PeriodFilter.LAST_6: 6,
}


@dataclass(frozen=True)
class Period:
    start: date
    end: date


def resolve_period(
    period_filter: Union[PeriodFilter, str],
    *,
    year: int,
    month: int,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> Period:
    """Date range of a period preset relative to the reference (year, month).

    ``lastN`` covers the N whole months before the reference month.
    """

    try:
        period_filter = PeriodFilter(period_filter)
    except ValueError:
        raise ValidationError(f"Unknown period filter: {period_filter!r}") from None

    if period_filter is PeriodFilter.CURRENT:
        return Period(*month_bounds(year, month))

    if period_filter is PeriodFilter.YEAR:
        return Period(date(year, 1, 1), date(year, 12, 31))

    if period_filter is PeriodFilter.CUSTOM:
        if start is None or end is None:
            raise ValidationError("Custom period requires start and end dates")
        if start > end:
            raise ValidationError("Period start must not be after its end")
        return Period(start, end)

    lookback = _LOOKBACK_MONTHS[period_filter]
    first_year, first_month = shift_month(year, month, -lookback)
    last_year, last_month = shift_month(year, month, -1)
    return Period(month_bounds(first_year, first_month)[0], month_bounds(last_year, last_month)[1])
