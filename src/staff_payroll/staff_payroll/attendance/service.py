from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional, Sequence, Union

from ..common.datetime_utils import month_bounds, now_local
from ..core.constants import ATTENDANCE_CYCLE
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

StatusLike = Union[AttendanceStatus, str]


def coerce_status(value: StatusLike) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value!r}") from None


class AttendanceService:
    """Attendance ledger: each employee-day is an independent overwritable slot."""

    def __init__(self, attendance: AttendanceRepository, *, clock: Optional[Callable[[], datetime]] = None):
        self._attendance = attendance
        self._clock = clock or now_local

    def mark_attendance(
        self,
        employee_id: str,
        work_date: date,
        status: StatusLike,
        *,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        status = coerce_status(status)
        record = self._attendance.upsert(
            employee_id=employee_id,
            work_date=work_date,
            status=status,
            now=now or self._clock(),
        )
        logger.debug("Marked %s on %s as %s", employee_id, work_date, status.value)
        return record

    def unmark_attendance(self, employee_id: str, work_date: date) -> bool:
        removed = self._attendance.delete(employee_id, work_date)
        if removed:
            logger.debug("Unmarked %s on %s", employee_id, work_date)
        return removed

    def get_attendance_for_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_employee_and_date(employee_id, work_date)

    def get_attendance_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        """Full attendance history, newest first."""
        return self._attendance.list_for_employee(employee_id)

    def get_attendance_for_range(self, employee_id: str, start: date, end: date) -> Sequence[AttendanceRecord]:
        if start > end:
            return []
        return self._attendance.get_range(employee_id, start, end)

    def get_attendance_for_month(self, employee_id: str, year: int, month: int) -> Sequence[AttendanceRecord]:
        start, end = month_bounds(year, month)
        return self._attendance.get_range(employee_id, start, end)

    def delete_all_for_employee(self, employee_id: str) -> int:
        removed = self._attendance.delete_all_for_employee(employee_id)
        logger.info("Deleted %d attendance records for %s", removed, employee_id)
        return removed

    def cycle_attendance(
        self,
        employee_id: str,
        work_date: date,
        *,
        now: datetime | None = None,
    ) -> Optional[AttendanceRecord]:
        """Advance the day through unmarked -> present -> half -> leave -> absent -> unmarked."""

        current = self._attendance.get_for_employee_and_date(employee_id, work_date)
        index = ATTENDANCE_CYCLE.index(current.status.value if current else None)
        next_status = ATTENDANCE_CYCLE[(index + 1) % len(ATTENDANCE_CYCLE)]
        if next_status is None:
            self.unmark_attendance(employee_id, work_date)
            return None
        return self.mark_attendance(employee_id, work_date, next_status, now=now)
