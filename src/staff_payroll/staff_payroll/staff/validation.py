from __future__ import annotations

from typing import List

from ..common.validators import check_non_empty, check_pattern, check_percent
from ..core.constants import PHONE_PATTERN
from ..core.exceptions import ValidationError
from .model import Employee, SalaryConfig


def validate_salary_config(config: SalaryConfig) -> List[str]:
    """Return every violated salary constraint (empty when valid)."""

    errors: List[str] = []
    if config.monthly_salary <= 0:
        errors.append("Monthly salary must be greater than zero")
    if config.basic_percent + config.hra_percent > 100:
        errors.append("Basic % + HRA % cannot exceed 100%")
    check_percent(errors, config.basic_percent, "Basic %")
    check_percent(errors, config.hra_percent, "HRA %")
    check_percent(errors, config.pf_percent, "PF %")
    check_percent(errors, config.esi_percent, "ESI %")
    if config.allowances_amount < 0:
        errors.append("Allowances amount cannot be negative")
    if config.allowed_leave_days < 0:
        errors.append("Allowed leave days cannot be negative")
    return errors


def validate_employee(employee: Employee) -> List[str]:
    errors: List[str] = []
    check_non_empty(errors, employee.name, "Name is required")
    if check_non_empty(errors, employee.phone, "Phone number is required"):
        check_pattern(errors, employee.phone, PHONE_PATTERN, "Invalid phone number format")
    check_non_empty(errors, employee.position, "Position is required")
    errors.extend(validate_salary_config(employee.salary))
    return errors


def ensure_valid_salary_config(config: SalaryConfig) -> SalaryConfig:
    errors = validate_salary_config(config)
    if errors:
        raise ValidationError("Invalid salary configuration", errors)
    return config


def ensure_valid_employee(employee: Employee) -> Employee:
    errors = validate_employee(employee)
    if errors:
        raise ValidationError("Invalid employee data", errors)
    return employee
