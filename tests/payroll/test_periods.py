from __future__ import annotations

from datetime import date

import pytest

from src.staff_payroll.staff_payroll.core.enums import PeriodFilter
from src.staff_payroll.staff_payroll.core.exceptions import ValidationError
from src.staff_payroll.staff_payroll.payroll.periods import resolve_period


@pytest.mark.parametrize(
    "period_filter,start,end",
    [
        ("current", date(2024, 3, 1), date(2024, 3, 31)),
        ("last1", date(2024, 2, 1), date(2024, 2, 29)),
        ("last2", date(2024, 1, 1), date(2024, 2, 29)),
        ("last3", date(2023, 12, 1), date(2024, 2, 29)),
        ("last6", date(2023, 9, 1), date(2024, 2, 29)),
        ("year", date(2024, 1, 1), date(2024, 12, 31)),
    ],
)
def test_presets_relative_to_march_2024(period_filter, start, end):
    period = resolve_period(period_filter, year=2024, month=3)
    assert (period.start, period.end) == (start, end)


def test_last_month_crosses_year_boundary():
    period = resolve_period(PeriodFilter.LAST_1, year=2025, month=1)
    assert (period.start, period.end) == (date(2024, 12, 1), date(2024, 12, 31))


def test_custom_requires_bounds():
    with pytest.raises(ValidationError):
        resolve_period(PeriodFilter.CUSTOM, year=2025, month=1)

    period = resolve_period(PeriodFilter.CUSTOM, year=2025, month=1, start=date(2025, 1, 5), end=date(2025, 2, 5))
    assert period.end == date(2025, 2, 5)


def test_unknown_filter_is_rejected():
    with pytest.raises(ValidationError):
        resolve_period("fortnight", year=2025, month=1)
