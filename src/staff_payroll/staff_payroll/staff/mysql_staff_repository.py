from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone
from .model import Employee, SalaryConfig
from .repository import StaffRepository

_COLUMNS = (
    "employee_id, name, phone, email, position, hire_date, address, emergency_contact, notes, is_active, "
    "monthly_salary, basic_percent, hra_percent, allowances_amount, include_pf, pf_percent, "
    "include_esi, esi_percent, allowed_leave_days, created_at, updated_at"
)


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=str(r["employee_id"]),
        name=r["name"],
        phone=r["phone"],
        email=r.get("email"),
        position=r["position"],
        hire_date=r["hire_date"],
        address=r.get("address"),
        emergency_contact=r.get("emergency_contact"),
        notes=r.get("notes"),
        is_active=bool(r["is_active"]),
        salary=SalaryConfig(
            monthly_salary=as_decimal(r["monthly_salary"]),
            basic_percent=as_decimal(r["basic_percent"]),
            hra_percent=as_decimal(r["hra_percent"]),
            allowances_amount=as_decimal(r["allowances_amount"]),
            include_pf=bool(r["include_pf"]),
            pf_percent=as_decimal(r["pf_percent"]),
            include_esi=bool(r["include_esi"]),
            esi_percent=as_decimal(r["esi_percent"]),
            allowed_leave_days=int(r["allowed_leave_days"]),
        ),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM staff_members WHERE employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM staff_members ORDER BY created_at DESC")
            return [_to_employee(r) for r in fetchall(cur)]

    def save(self, employee: Employee) -> Employee:
        s = employee.salary
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                REPLACE INTO staff_members({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee.employee_id,
                    employee.name,
                    employee.phone,
                    employee.email,
                    employee.position,
                    employee.hire_date,
                    employee.address,
                    employee.emergency_contact,
                    employee.notes,
                    int(employee.is_active),
                    s.monthly_salary,
                    s.basic_percent,
                    s.hra_percent,
                    s.allowances_amount,
                    int(s.include_pf),
                    s.pf_percent,
                    int(s.include_esi),
                    s.esi_percent,
                    s.allowed_leave_days,
                    employee.created_at,
                    employee.updated_at,
                ),
            )
        return employee

    def delete(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM staff_members WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0
