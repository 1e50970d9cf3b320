from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status of one employee-day."""

    PRESENT = "present"
    HALF = "half"
    LEAVE = "leave"
    ABSENT = "absent"


class PeriodFilter(str, Enum):
    """Period presets used by attendance summary views."""

    CURRENT = "current"
    LAST_1 = "last1"
    LAST_2 = "last2"
    LAST_3 = "last3"
    LAST_6 = "last6"
    YEAR = "year"
    CUSTOM = "custom"


class StaffStatusFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"
