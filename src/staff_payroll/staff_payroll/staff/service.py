from __future__ import annotations

import dataclasses
import logging
import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, List, Optional, Sequence, Union

from ..attendance.service import AttendanceService
from ..common.datetime_utils import now_local
from ..common.money import round_money
from ..core.enums import StaffStatusFilter
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, SalaryConfig, StaffStats
from .repository import StaffRepository
from .validation import ensure_valid_employee

logger = logging.getLogger(__name__)

_IMMUTABLE_FIELDS = {"employee_id", "created_at", "updated_at"}


class StaffService:
    def __init__(
        self,
        staff: StaffRepository,
        attendance: AttendanceService,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._staff = staff
        self._attendance = attendance
        self._clock = clock or now_local

    def add_employee(
        self,
        *,
        name: str,
        phone: str,
        position: str,
        salary: SalaryConfig,
        hire_date: date | None = None,
        email: str | None = None,
        address: str | None = None,
        emergency_contact: str | None = None,
        notes: str | None = None,
        is_active: bool = True,
        employee_id: str | None = None,
    ) -> Employee:
        now = self._clock()
        employee = Employee(
            employee_id=employee_id or uuid.uuid4().hex,
            name=(name or "").strip(),
            phone=(phone or "").strip(),
            position=(position or "").strip(),
            hire_date=hire_date or now.date(),
            salary=salary,
            email=email,
            address=address,
            emergency_contact=emergency_contact,
            notes=notes,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )
        ensure_valid_employee(employee)
        if self._staff.get_by_id(employee.employee_id):
            raise ValidationError(f"Employee '{employee.employee_id}' already exists")
        self._staff.save(employee)
        logger.info("Added employee %s (%s)", employee.employee_id, employee.name)
        return employee

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._staff.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee", employee_id)
        return employee

    def list_employees(self) -> Sequence[Employee]:
        return self._staff.list_all()

    def update_employee(self, employee_id: str, **changes) -> Employee:
        blocked = _IMMUTABLE_FIELDS.intersection(changes)
        if blocked:
            raise ValidationError(f"Cannot update field(s): {', '.join(sorted(blocked))}")

        current = self.get_employee(employee_id)
        updated = dataclasses.replace(current, updated_at=self._clock(), **changes)
        ensure_valid_employee(updated)
        self._staff.save(updated)
        logger.info("Updated employee %s", employee_id)
        return updated

    def delete_employee(self, employee_id: str) -> bool:
        """Delete the employee together with its attendance history."""

        removed = self._staff.delete(employee_id)
        self._attendance.delete_all_for_employee(employee_id)
        if removed:
            logger.info("Deleted employee %s", employee_id)
        return removed

    def toggle_active(self, employee_id: str) -> Employee:
        current = self.get_employee(employee_id)
        return self.update_employee(employee_id, is_active=not current.is_active)

    def search(self, query: str) -> List[Employee]:
        needle = (query or "").strip().lower()
        employees = list(self._staff.list_all())
        if not needle:
            return employees
        return [
            e
            for e in employees
            if needle in e.name.lower()
            or needle in e.position.lower()
            or needle in e.phone
            or (e.email is not None and needle in e.email.lower())
        ]

    def filter_by_status(self, status: Union[StaffStatusFilter, str]) -> List[Employee]:
        try:
            status = StaffStatusFilter(status)
        except ValueError:
            raise ValidationError(f"Unknown status filter: {status!r}") from None
        employees = list(self._staff.list_all())
        if status is StaffStatusFilter.ALL:
            return employees
        want_active = status is StaffStatusFilter.ACTIVE
        return [e for e in employees if e.is_active == want_active]

    def stats(self) -> StaffStats:
        employees = list(self._staff.list_all())
        active = [e for e in employees if e.is_active]
        total_payroll = sum((e.salary.monthly_salary for e in active), Decimal("0"))
        return StaffStats(
            total=len(employees),
            active=len(active),
            inactive=len(employees) - len(active),
            total_monthly_payroll=round_money(total_payroll),
        )
