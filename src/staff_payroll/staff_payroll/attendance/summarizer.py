from __future__ import annotations

from collections import Counter
from decimal import Decimal
from typing import Iterable

from ..common.money import round_money
from ..core.constants import DEFAULT_ALLOWED_LEAVE_DAYS
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, AttendanceSummary


class AttendanceSummarizer:
    """Aggregate a period of attendance into counts and a paid/unpaid leave split.

    Leave is accounted for by count only: the first ``allowed_leave_days``
    leave days are paid, the rest unpaid, without tying either to a date.
    """

    def summarize(
        self,
        records: Iterable[AttendanceRecord],
        allowed_leave_days: int = DEFAULT_ALLOWED_LEAVE_DAYS,
    ) -> AttendanceSummary:
        counts = Counter(r.status for r in records)
        return self.summarize_counts(
            present=counts[AttendanceStatus.PRESENT],
            half=counts[AttendanceStatus.HALF],
            leave=counts[AttendanceStatus.LEAVE],
            absent=counts[AttendanceStatus.ABSENT],
            allowed_leave_days=allowed_leave_days,
        )

    def summarize_counts(
        self,
        *,
        present: int = 0,
        half: int = 0,
        leave: int = 0,
        absent: int = 0,
        allowed_leave_days: int = DEFAULT_ALLOWED_LEAVE_DAYS,
    ) -> AttendanceSummary:
        if min(present, half, leave, absent, allowed_leave_days) < 0:
            raise ValidationError("Attendance counts and allowed leave days cannot be negative")

        paid_leave_days = min(leave, allowed_leave_days)
        unpaid_leave_days = max(0, leave - allowed_leave_days)
        remaining_leave_days = max(0, allowed_leave_days - leave)
        # Marked days, not calendar days.
        days_completed = present + half + leave + absent

        effective_present_days = Decimal(present) + Decimal(half) * Decimal("0.5") + Decimal(paid_leave_days)
        if days_completed > 0:
            percentage = round_money(effective_present_days / Decimal(days_completed) * 100)
        else:
            percentage = round_money(Decimal(0))

        return AttendanceSummary(
            present=present,
            half=half,
            leave=leave,
            absent=absent,
            paid_leave_days=paid_leave_days,
            unpaid_leave_days=unpaid_leave_days,
            remaining_leave_days=remaining_leave_days,
            days_completed=days_completed,
            attendance_percentage=percentage,
            allowed_leave_days=allowed_leave_days,
        )
