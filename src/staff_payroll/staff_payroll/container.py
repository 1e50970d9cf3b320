from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .payroll.service import PayrollService
from .staff.memory_staff_repository import InMemoryStaffRepository
from .staff.mysql_staff_repository import MySQLStaffRepository
from .staff.repository import StaffRepository
from .staff.service import StaffService

BACKENDS = ("memory", "mysql")


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    staff_repo: StaffRepository
    attendance_repo: AttendanceRepository

    attendance_service: AttendanceService
    staff_service: StaffService
    payroll_service: PayrollService


def build_container(*, backend: str = "memory", db_config: Optional[dict] = None) -> Container:
    if backend not in BACKENDS:
        raise ValueError(f"Unknown storage backend: {backend!r}")

    conn: Optional[DatabaseConnection] = None
    if backend == "mysql":
        if not db_config:
            raise ValueError("MySQL backend requires db_config")
        conn = DatabaseConnection(DBConfig.from_dict(db_config))
        staff_repo: StaffRepository = MySQLStaffRepository(conn)
        attendance_repo: AttendanceRepository = MySQLAttendanceRepository(conn)
    else:
        staff_repo = InMemoryStaffRepository()
        attendance_repo = InMemoryAttendanceRepository()

    attendance_service = AttendanceService(attendance_repo)
    staff_service = StaffService(staff_repo, attendance_service)
    payroll_service = PayrollService(staff_repo, attendance_service)

    return Container(
        conn=conn,
        staff_repo=staff_repo,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        staff_service=staff_service,
        payroll_service=payroll_service,
    )
