from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from ..core.enums import AttendanceStatus


def make_record_id(employee_id: str, work_date: date) -> str:
    return f"{employee_id}_{work_date.isoformat()}"


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee-day of attendance."""

    record_id: str
    employee_id: str
    work_date: date
    status: AttendanceStatus
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model aggregating a period of attendance (never persisted)."""

    present: int
    half: int
    leave: int
    absent: int
    paid_leave_days: int
    unpaid_leave_days: int
    remaining_leave_days: int
    days_completed: int
    attendance_percentage: Decimal
    allowed_leave_days: int

    @property
    def free_leave_days(self) -> int:
        return self.paid_leave_days

    def to_dict(self) -> dict:
        return {
            "present": self.present,
            "half": self.half,
            "leave": self.leave,
            "absent": self.absent,
            "paid_leave_days": self.paid_leave_days,
            "unpaid_leave_days": self.unpaid_leave_days,
            "free_leave_days": self.free_leave_days,
            "remaining_leave_days": self.remaining_leave_days,
            "days_completed": self.days_completed,
            "attendance_percentage": self.attendance_percentage,
            "allowed_leave_days": self.allowed_leave_days,
        }
