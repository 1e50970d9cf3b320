from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ...attendance.model import AttendanceSummary
from ...common.datetime_utils import days_in_month
from ...common.money import round_money
from ...staff.model import SalaryConfig
from ..model import SalaryBreakdown
from ..structure import SalaryStructureResolver
from .base import PayrollCalculator

_HUNDRED = Decimal(100)
_ZERO = Decimal(0)


class StandardPayrollCalculator(PayrollCalculator):
    """Pro-rate a monthly salary by calendar days actually earned.

    Earned pay = present days + half days at half rate + paid leave days, all
    at ``monthly_salary / days_in_month``. The attendance deduction is what the
    employee did not earn out of ``monthly_salary``; PF and ESI apply to earned
    pay. Assumes a validated ``SalaryConfig`` and never raises for
    non-negative counts.
    """

    def __init__(self, resolver: Optional[SalaryStructureResolver] = None):
        self._resolver = resolver or SalaryStructureResolver()

    def calculate(
        self,
        config: SalaryConfig,
        summary: AttendanceSummary,
        *,
        year: int,
        month: int,
    ) -> SalaryBreakdown:
        days = days_in_month(year, month)
        monthly_salary = config.monthly_salary
        daily_salary = monthly_salary / Decimal(days)

        structure = self._resolver.resolve(config)
        gross_earnings = structure.gross_earnings

        present_earnings = Decimal(summary.present) * daily_salary
        half_day_earnings = Decimal(summary.half) * (daily_salary / 2)
        paid_leave_earnings = Decimal(summary.paid_leave_days) * daily_salary
        total_earned = present_earnings + half_day_earnings + paid_leave_earnings

        # Base is monthly_salary, not gross_earnings, even with allowances.
        attendance_deduction = monthly_salary - total_earned
        pf_amount = total_earned * config.pf_percent / _HUNDRED if config.include_pf else _ZERO
        esi_amount = total_earned * config.esi_percent / _HUNDRED if config.include_esi else _ZERO
        unpaid_leave_deduction = Decimal(summary.unpaid_leave_days) * daily_salary

        total_deductions = attendance_deduction + pf_amount + esi_amount
        net_salary = gross_earnings - total_deductions

        return SalaryBreakdown(
            basic_amount=round_money(structure.basic_amount),
            hra_amount=round_money(structure.hra_amount),
            allowances_amount=round_money(structure.allowances_amount),
            gross_earnings=round_money(gross_earnings),
            present_earnings=round_money(present_earnings),
            half_day_earnings=round_money(half_day_earnings),
            paid_leave_earnings=round_money(paid_leave_earnings),
            total_earned=round_money(total_earned),
            pf_amount=round_money(pf_amount),
            esi_amount=round_money(esi_amount),
            attendance_deduction=round_money(attendance_deduction),
            unpaid_leave_deduction=round_money(unpaid_leave_deduction),
            total_deductions=round_money(total_deductions),
            net_salary=round_money(net_salary),
            is_simple_mode=config.is_simple_mode,
            basic_percent=config.basic_percent,
            hra_percent=config.hra_percent,
            include_pf=config.include_pf,
            include_esi=config.include_esi,
            pf_percent=config.pf_percent,
            esi_percent=config.esi_percent,
            year=year,
            month=month,
            days_in_month=days,
            daily_salary=round_money(daily_salary),
        )
