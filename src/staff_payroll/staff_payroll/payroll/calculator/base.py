from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import AttendanceSummary
from ...staff.model import SalaryConfig
from ..model import SalaryBreakdown


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        config: SalaryConfig,
        summary: AttendanceSummary,
        *,
        year: int,
        month: int,
    ) -> SalaryBreakdown:
        raise NotImplementedError
