from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..common.money import to_decimal
from ..core.constants import (
    DEFAULT_ALLOWANCES_AMOUNT,
    DEFAULT_ALLOWED_LEAVE_DAYS,
    DEFAULT_BASIC_PERCENT,
    DEFAULT_ESI_PERCENT,
    DEFAULT_HRA_PERCENT,
    DEFAULT_PF_PERCENT,
)
from ..core.exceptions import ValidationError

_DECIMAL_FIELDS = {
    "monthly_salary": "Monthly salary",
    "basic_percent": "Basic %",
    "hra_percent": "HRA %",
    "allowances_amount": "Allowances amount",
    "pf_percent": "PF %",
    "esi_percent": "ESI %",
}


def _parse_decimal(value) -> Optional[Decimal]:
    """Finite Decimal, or None for junk, NaN and infinities."""
    if isinstance(value, bool):
        return None
    try:
        parsed = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return None
    return parsed if parsed.is_finite() else None


@dataclass(frozen=True)
class SalaryConfig:
    """Salary structure of one employee.

    Defaults describe a flat salary: all of it is basic, no HRA, no
    allowances, no statutory deductions.
    """

    monthly_salary: Decimal
    basic_percent: Decimal = DEFAULT_BASIC_PERCENT
    hra_percent: Decimal = DEFAULT_HRA_PERCENT
    allowances_amount: Decimal = DEFAULT_ALLOWANCES_AMOUNT
    include_pf: bool = False
    pf_percent: Decimal = DEFAULT_PF_PERCENT
    include_esi: bool = False
    esi_percent: Decimal = DEFAULT_ESI_PERCENT
    allowed_leave_days: int = DEFAULT_ALLOWED_LEAVE_DAYS

    def __post_init__(self):
        # Unparseable input never reaches range validation; report it all at once.
        errors = []
        for name, label in _DECIMAL_FIELDS.items():
            value = _parse_decimal(getattr(self, name))
            if value is None:
                errors.append(f"{label} must be a number")
            else:
                object.__setattr__(self, name, value)

        leave = _parse_decimal(self.allowed_leave_days)
        if leave is None or leave != leave.to_integral_value():
            errors.append("Allowed leave days must be a whole number")
        else:
            object.__setattr__(self, "allowed_leave_days", int(leave))

        if errors:
            raise ValidationError("Invalid salary configuration", errors)

    @property
    def is_simple_mode(self) -> bool:
        return (
            self.basic_percent == 100
            and self.hra_percent == 0
            and not self.include_pf
            and not self.include_esi
        )


@dataclass(frozen=True)
class Employee:
    employee_id: str
    name: str
    phone: str
    position: str
    hire_date: date
    salary: SalaryConfig
    email: Optional[str] = None
    address: Optional[str] = None
    emergency_contact: Optional[str] = None
    notes: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = field(default=None, compare=False)
    updated_at: Optional[datetime] = field(default=None, compare=False)


@dataclass(frozen=True)
class StaffStats:
    total: int
    active: int
    inactive: int
    total_monthly_payroll: Decimal
