from __future__ import annotations

from decimal import Decimal

from ..staff.model import SalaryConfig
from .model import SalaryStructure

_HUNDRED = Decimal(100)


class SalaryStructureResolver:
    """Expand a salary configuration into basic, HRA and fixed allowances.

    A flat salary is just the default configuration (100% basic), so both
    flat and itemised salaries go through the same formulas.
    """

    def resolve(self, config: SalaryConfig) -> SalaryStructure:
        return SalaryStructure(
            basic_amount=config.monthly_salary * config.basic_percent / _HUNDRED,
            hra_amount=config.monthly_salary * config.hra_percent / _HUNDRED,
            allowances_amount=config.allowances_amount,
        )
