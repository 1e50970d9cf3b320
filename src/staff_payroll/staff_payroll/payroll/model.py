from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..attendance.model import AttendanceSummary
from ..staff.model import Employee


@dataclass(frozen=True)
class SalaryStructure:
    """Attendance-independent earning components, unrounded."""

    basic_amount: Decimal
    hra_amount: Decimal
    allowances_amount: Decimal

    @property
    def gross_earnings(self) -> Decimal:
        return self.basic_amount + self.hra_amount + self.allowances_amount


@dataclass(frozen=True)
class SalaryBreakdown:
    """Immutable payroll snapshot of one employee for one month.

    Monetary fields are rounded to 2 decimals, each from its own unrounded
    value. ``unpaid_leave_deduction`` is informational and already contained
    in ``attendance_deduction``; it is not part of ``total_deductions``.
    """

    # Earnings
    basic_amount: Decimal
    hra_amount: Decimal
    allowances_amount: Decimal
    gross_earnings: Decimal

    # Attendance-based earnings
    present_earnings: Decimal
    half_day_earnings: Decimal
    paid_leave_earnings: Decimal
    total_earned: Decimal

    # Deductions
    pf_amount: Decimal
    esi_amount: Decimal
    attendance_deduction: Decimal
    unpaid_leave_deduction: Decimal
    total_deductions: Decimal

    net_salary: Decimal

    # Configuration echo
    is_simple_mode: bool
    basic_percent: Decimal
    hra_percent: Decimal
    include_pf: bool
    include_esi: bool
    pf_percent: Decimal
    esi_percent: Decimal

    # Period
    year: int
    month: int
    days_in_month: int
    daily_salary: Decimal

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PayrollResult:
    employee: Employee
    year: int
    month: int
    summary: AttendanceSummary
    breakdown: SalaryBreakdown


@dataclass(frozen=True)
class PayslipData:
    """Everything a payslip renderer needs; no formatting applied to amounts."""

    employee_code: str
    employee_name: str
    employee_position: str
    employee_department: str
    employee_joining_date: date
    employee_phone: str
    employee_email: Optional[str]
    period_label: str
    generated_on: date
    days_in_month: int
    summary: AttendanceSummary
    breakdown: SalaryBreakdown
    file_name: str
