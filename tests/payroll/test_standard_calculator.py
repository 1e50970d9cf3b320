from __future__ import annotations

from decimal import Decimal

import pytest

from src.staff_payroll.staff_payroll.attendance.summarizer import AttendanceSummarizer
from src.staff_payroll.staff_payroll.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.staff_payroll.staff_payroll.staff.model import SalaryConfig

# April 2025 has 30 days, January 2024 has 31.
APRIL = dict(year=2025, month=4)
JANUARY = dict(year=2024, month=1)


def _summary(**counts):
    return AttendanceSummarizer().summarize_counts(**counts)


def test_full_month_simple_mode_scenario():
    config = SalaryConfig(monthly_salary=30000)
    summary = _summary(present=28, leave=1, absent=1, allowed_leave_days=2)

    b = StandardPayrollCalculator().calculate(config, summary, **APRIL)

    assert b.days_in_month == 30
    assert b.daily_salary == Decimal("1000.00")
    assert b.is_simple_mode is True
    assert b.total_earned == Decimal("29000.00")
    assert b.attendance_deduction == Decimal("1000.00")
    assert b.total_deductions == Decimal("1000.00")
    assert b.gross_earnings == Decimal("30000.00")
    assert b.net_salary == Decimal("29000.00")
    assert b.unpaid_leave_deduction == Decimal("0.00")


def test_unpaid_leave_is_reported_but_not_double_counted():
    config = SalaryConfig(monthly_salary=30000, allowed_leave_days=0)
    summary = _summary(present=28, leave=1, absent=1, allowed_leave_days=0)

    b = StandardPayrollCalculator().calculate(config, summary, **APRIL)

    assert summary.paid_leave_days == 0
    assert summary.unpaid_leave_days == 1
    assert b.total_earned == Decimal("28000.00")
    assert b.attendance_deduction == Decimal("2000.00")
    assert b.unpaid_leave_deduction == Decimal("1000.00")
    assert b.total_deductions == Decimal("2000.00")
    assert b.net_salary == Decimal("28000.00")


def test_no_attendance_deducts_whole_salary():
    config = SalaryConfig(monthly_salary=30000)
    summary = _summary()

    b = StandardPayrollCalculator().calculate(config, summary, **APRIL)

    assert summary.attendance_percentage == 0
    assert b.total_earned == Decimal("0.00")
    assert b.attendance_deduction == Decimal("30000.00")
    assert b.net_salary == Decimal("0.00")


def test_pf_and_esi_apply_to_earned_pay():
    config = SalaryConfig(
        monthly_salary=31000,
        include_pf=True,
        pf_percent=12,
        include_esi=True,
        esi_percent=Decimal("0.75"),
    )
    b = StandardPayrollCalculator().calculate(config, _summary(present=31), **JANUARY)

    assert b.is_simple_mode is False
    assert b.pf_amount == Decimal("3720.00")
    assert b.esi_amount == Decimal("232.50")
    assert b.attendance_deduction == Decimal("0.00")
    assert b.total_deductions == Decimal("3952.50")
    assert b.net_salary == Decimal("27047.50")


def test_disabled_statutory_deductions_are_zero_even_with_percentages():
    config = SalaryConfig(monthly_salary=31000, pf_percent=12, esi_percent=Decimal("0.75"))
    b = StandardPayrollCalculator().calculate(config, _summary(present=31), **JANUARY)

    assert b.pf_amount == 0
    assert b.esi_amount == 0


def test_itemised_structure_and_allowances():
    config = SalaryConfig(monthly_salary=30000, basic_percent=60, hra_percent=40, allowances_amount=5000)
    b = StandardPayrollCalculator().calculate(config, _summary(present=30), **APRIL)

    assert b.basic_amount == Decimal("18000.00")
    assert b.hra_amount == Decimal("12000.00")
    assert b.allowances_amount == Decimal("5000.00")
    assert b.gross_earnings == Decimal("35000.00")
    # Deduction base is the monthly salary, so allowances pass through untouched.
    assert b.attendance_deduction == Decimal("0.00")
    assert b.net_salary == Decimal("35000.00")
    assert b.is_simple_mode is False


def test_half_days_earn_half_the_daily_rate():
    config = SalaryConfig(monthly_salary=10000)
    b = StandardPayrollCalculator().calculate(config, _summary(present=1, half=1), **JANUARY)

    assert b.daily_salary == Decimal("322.58")
    assert b.present_earnings == Decimal("322.58")
    assert b.half_day_earnings == Decimal("161.29")
    assert b.total_earned == Decimal("483.87")


@pytest.mark.parametrize(
    "year,month,days",
    [(2024, 2, 29), (2023, 2, 28), (2000, 2, 29), (1900, 2, 28), (2025, 4, 30), (2025, 12, 31)],
)
def test_days_in_month(year, month, days):
    b = StandardPayrollCalculator().calculate(SalaryConfig(monthly_salary=1000), _summary(), year=year, month=month)
    assert b.days_in_month == days


def test_simple_mode_gross_equals_monthly_salary():
    config = SalaryConfig(monthly_salary=Decimal("45678.91"))
    b = StandardPayrollCalculator().calculate(config, _summary(present=3), year=2024, month=2)
    assert b.gross_earnings == Decimal("45678.91")


def test_calculation_is_deterministic():
    config = SalaryConfig(monthly_salary=12345, include_pf=True, include_esi=True)
    summary = _summary(present=17, half=3, leave=4, absent=2, allowed_leave_days=2)
    calc = StandardPayrollCalculator()

    assert calc.calculate(config, summary, **JANUARY) == calc.calculate(config, summary, **JANUARY)


@pytest.mark.parametrize("salary", [30000, 10000, 12345])
@pytest.mark.parametrize("period", [(2024, 2), (2025, 4), (2025, 1)])
@pytest.mark.parametrize(
    "counts",
    [
        dict(),
        dict(present=28, leave=1, absent=1),
        dict(present=10, half=5, leave=3, absent=2),
        dict(present=31),
    ],
)
def test_net_salary_identity(salary, period, counts):
    config = SalaryConfig(monthly_salary=salary, basic_percent=70, hra_percent=20, allowances_amount=1500)
    b = StandardPayrollCalculator().calculate(config, _summary(**counts), year=period[0], month=period[1])

    assert abs(b.net_salary - (b.gross_earnings - b.total_deductions)) <= Decimal("0.01")
    assert abs(b.net_salary - (b.gross_earnings - (b.attendance_deduction + b.pf_amount + b.esi_amount))) <= Decimal("0.01")


def test_to_dict_exposes_plain_mapping():
    b = StandardPayrollCalculator().calculate(SalaryConfig(monthly_salary=30000), _summary(present=30), **APRIL)
    data = b.to_dict()

    assert data["net_salary"] == Decimal("30000.00")
    assert data["days_in_month"] == 30
    assert data["month"] == 4
