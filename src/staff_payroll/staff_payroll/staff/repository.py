from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class StaffRepository(Protocol):
    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """Newest first."""

        raise NotImplementedError

    def save(self, employee: Employee) -> Employee:
        """Insert or replace by employee_id."""

        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        raise NotImplementedError
