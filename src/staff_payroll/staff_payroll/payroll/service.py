from __future__ import annotations

import logging
import re
from datetime import date
from typing import List, Optional, Union

from ..attendance.model import AttendanceSummary
from ..attendance.service import AttendanceService
from ..attendance.summarizer import AttendanceSummarizer
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_DEPARTMENT
from ..core.enums import PeriodFilter
from ..core.exceptions import NotFoundError, ValidationError
from ..staff.model import Employee
from ..staff.repository import StaffRepository
from ..staff.validation import ensure_valid_salary_config
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollResult, PayslipData
from .periods import resolve_period

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def employee_code(employee_id: str) -> str:
    """EMP- followed by the last four characters of the id, zero padded."""
    return f"EMP-{employee_id[-4:].rjust(4, '0')}"


def period_label(year: int, month: int) -> str:
    return f"{MONTH_NAMES[month - 1]} {year}"


def payslip_file_name(employee_name: str, label: str, extension: str = "pdf") -> str:
    name = re.sub(r"[^a-zA-Z0-9]", "_", employee_name)
    period = re.sub(r"[^a-zA-Z0-9]", "_", label)
    return f"Payslip_{name}_{period}.{extension}"


class PayrollService:
    """Attendance ledger -> summary -> salary breakdown for one month."""

    def __init__(
        self,
        staff: StaffRepository,
        attendance: AttendanceService,
        *,
        summarizer: Optional[AttendanceSummarizer] = None,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._staff = staff
        self._attendance = attendance
        self._summarizer = summarizer or AttendanceSummarizer()
        self._calculator = calculator or StandardPayrollCalculator()

    def _get_employee(self, employee_id: str) -> Employee:
        employee = self._staff.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee", employee_id)
        return employee

    def calculate_for_employee(self, employee: Employee, year: int, month: int) -> PayrollResult:
        if not 1 <= month <= 12:
            raise ValidationError(f"Month must be between 1 and 12, got {month}")
        ensure_valid_salary_config(employee.salary)

        records = self._attendance.get_attendance_for_month(employee.employee_id, year, month)
        summary = self._summarizer.summarize(records, employee.salary.allowed_leave_days)
        breakdown = self._calculator.calculate(employee.salary, summary, year=year, month=month)
        return PayrollResult(employee=employee, year=year, month=month, summary=summary, breakdown=breakdown)

    def calculate_monthly_payroll(self, employee_id: str, year: int, month: int) -> PayrollResult:
        return self.calculate_for_employee(self._get_employee(employee_id), year, month)

    def calculate_payroll_for_all(self, year: int, month: int, *, active_only: bool = True) -> List[PayrollResult]:
        results: List[PayrollResult] = []
        for employee in self._staff.list_all():
            if active_only and not employee.is_active:
                continue
            try:
                results.append(self.calculate_for_employee(employee, year, month))
            except ValidationError as exc:
                logger.warning(
                    "Skipping payroll for %s %04d-%02d: %s",
                    employee.employee_id,
                    year,
                    month,
                    "; ".join(exc.errors),
                )
        return results

    def summarize_period(
        self,
        employee_id: str,
        period_filter: Union[PeriodFilter, str],
        *,
        year: int,
        month: int,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> AttendanceSummary:
        employee = self._get_employee(employee_id)
        period = resolve_period(period_filter, year=year, month=month, start=start, end=end)
        records = self._attendance.get_attendance_for_range(employee_id, period.start, period.end)
        return self._summarizer.summarize(records, employee.salary.allowed_leave_days)

    def build_payslip_data(
        self,
        result: PayrollResult,
        *,
        generated_on: Optional[date] = None,
        extension: str = "pdf",
    ) -> PayslipData:
        employee = result.employee
        label = period_label(result.year, result.month)
        return PayslipData(
            employee_code=employee_code(employee.employee_id),
            employee_name=employee.name,
            employee_position=employee.position,
            employee_department=DEFAULT_DEPARTMENT,
            employee_joining_date=employee.hire_date,
            employee_phone=employee.phone,
            employee_email=employee.email,
            period_label=label,
            generated_on=generated_on or now_local().date(),
            days_in_month=result.breakdown.days_in_month,
            summary=result.summary,
            breakdown=result.breakdown,
            file_name=payslip_file_name(employee.name, label, extension),
        )
