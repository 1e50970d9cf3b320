from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from src.staff_payroll.staff_payroll.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.staff_payroll.staff_payroll.attendance.service import AttendanceService
from src.staff_payroll.staff_payroll.core.exceptions import NotFoundError, ValidationError
from src.staff_payroll.staff_payroll.staff.memory_staff_repository import InMemoryStaffRepository
from src.staff_payroll.staff_payroll.staff.model import SalaryConfig
from src.staff_payroll.staff_payroll.staff.service import StaffService


class TickingClock:
    def __init__(self, start: datetime):
        self._now = start

    def __call__(self) -> datetime:
        self._now += timedelta(minutes=1)
        return self._now


def _setup():
    attendance = AttendanceService(InMemoryAttendanceRepository())
    svc = StaffService(InMemoryStaffRepository(), attendance, clock=TickingClock(datetime(2025, 1, 1, 9, 0)))
    return svc, attendance


def _add(svc: StaffService, name: str, salary: int = 20000, **kwargs):
    return svc.add_employee(
        name=name,
        phone=kwargs.pop("phone", "98765 43210"),
        position=kwargs.pop("position", "Sales"),
        salary=SalaryConfig(monthly_salary=salary),
        **kwargs,
    )


def test_add_and_get_employee():
    svc, _ = _setup()
    emp = _add(svc, "  Ravi Kumar ")

    assert emp.name == "Ravi Kumar"
    assert emp.hire_date == date(2025, 1, 1)
    assert svc.get_employee(emp.employee_id) == emp


def test_add_rejects_invalid_form():
    svc, _ = _setup()
    with pytest.raises(ValidationError) as exc:
        svc.add_employee(name="", phone="abc", position="", salary=SalaryConfig(monthly_salary=0))

    assert len(exc.value.errors) == 4


def test_add_rejects_duplicate_id():
    svc, _ = _setup()
    _add(svc, "A", employee_id="e1")
    with pytest.raises(ValidationError):
        _add(svc, "B", employee_id="e1")


def test_update_keeps_identity_and_created_at():
    svc, _ = _setup()
    emp = _add(svc, "A")

    updated = svc.update_employee(emp.employee_id, position="Manager", salary=SalaryConfig(monthly_salary=50000))

    assert updated.employee_id == emp.employee_id
    assert updated.created_at == emp.created_at
    assert updated.updated_at > emp.updated_at
    assert updated.salary.monthly_salary == Decimal("50000")


def test_update_rejects_identity_fields_and_invalid_salary():
    svc, _ = _setup()
    emp = _add(svc, "A")

    with pytest.raises(ValidationError):
        svc.update_employee(emp.employee_id, employee_id="other")
    with pytest.raises(ValidationError):
        svc.update_employee(emp.employee_id, salary=SalaryConfig(monthly_salary=100, hra_percent=10))
    assert svc.get_employee(emp.employee_id).salary.monthly_salary == Decimal("20000")


def test_get_missing_employee():
    svc, _ = _setup()
    with pytest.raises(NotFoundError):
        svc.get_employee("nope")


def test_delete_cascades_attendance():
    svc, attendance = _setup()
    emp = _add(svc, "A")
    attendance.mark_attendance(emp.employee_id, date(2025, 1, 2), "present")

    assert svc.delete_employee(emp.employee_id) is True
    assert attendance.get_attendance_for_month(emp.employee_id, 2025, 1) == []
    assert svc.delete_employee(emp.employee_id) is False


def test_toggle_search_filter_and_stats():
    svc, _ = _setup()
    a = _add(svc, "Meera", 30000, position="Accountant", email="Meera@Shop.in")
    b = _add(svc, "John", 20000, position="Driver")
    _add(svc, "Sunil", 10000, position="Helper", phone="11111")

    svc.toggle_active(b.employee_id)

    assert [e.name for e in svc.search("shop.in")] == ["Meera"]
    assert [e.name for e in svc.search("DRIV")] == ["John"]
    assert [e.name for e in svc.search("1111")] == ["Sunil"]
    assert len(svc.search("  ")) == 3
    assert [e.name for e in svc.filter_by_status("inactive")] == ["John"]
    assert {e.name for e in svc.filter_by_status("active")} == {"Meera", "Sunil"}
    assert svc.list_employees()[0].name == "Sunil"

    stats = svc.stats()
    assert (stats.total, stats.active, stats.inactive) == (3, 2, 1)
    assert stats.total_monthly_payroll == Decimal("40000.00")
    assert svc.get_employee(a.employee_id).is_active is True

    with pytest.raises(ValidationError):
        svc.filter_by_status("archived")
