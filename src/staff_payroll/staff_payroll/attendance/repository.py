from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Storage keyed by (employee_id, work_date); one record per key."""

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(
        self,
        *,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
        now: datetime,
    ) -> AttendanceRecord:
        """Insert or overwrite atomically, keeping the original created_at."""

        raise NotImplementedError

    def delete(self, employee_id: str, work_date: date) -> bool:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        """Every record of the employee, newest first."""

        raise NotImplementedError

    def get_range(self, employee_id: str, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Records within [start_date, end_date], ascending by date."""

        raise NotImplementedError

    def delete_all_for_employee(self, employee_id: str) -> int:
        raise NotImplementedError
