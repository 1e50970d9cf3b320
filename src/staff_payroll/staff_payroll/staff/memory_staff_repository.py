from __future__ import annotations

import threading
from datetime import datetime
from typing import Dict, Optional, Sequence

from .model import Employee
from .repository import StaffRepository


class InMemoryStaffRepository(StaffRepository):
    def __init__(self):
        self._by_id: Dict[str, Employee] = {}
        self._lock = threading.Lock()

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def list_all(self) -> Sequence[Employee]:
        items = list(self._by_id.values())
        items.sort(key=lambda e: e.created_at or datetime.min, reverse=True)
        return items

    def save(self, employee: Employee) -> Employee:
        with self._lock:
            self._by_id[employee.employee_id] = employee
        return employee

    def delete(self, employee_id: str) -> bool:
        with self._lock:
            return self._by_id.pop(employee_id, None) is not None
