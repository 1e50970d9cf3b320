from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Dict, Optional, Sequence, Tuple

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, make_record_id
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Dict-backed store; a lock makes each write all-or-nothing."""

    def __init__(self):
        self._by_key: Dict[Tuple[str, date], AttendanceRecord] = {}
        self._lock = threading.Lock()

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_key.get((employee_id, work_date))

    def upsert(
        self,
        *,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
        now: datetime,
    ) -> AttendanceRecord:
        key = (employee_id, work_date)
        with self._lock:
            existing = self._by_key.get(key)
            record = AttendanceRecord(
                record_id=make_record_id(employee_id, work_date),
                employee_id=employee_id,
                work_date=work_date,
                status=status,
                created_at=existing.created_at if existing else now,
                updated_at=now,
            )
            self._by_key[key] = record
            return record

    def delete(self, employee_id: str, work_date: date) -> bool:
        with self._lock:
            return self._by_key.pop((employee_id, work_date), None) is not None

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        items = [r for (emp, _), r in list(self._by_key.items()) if emp == employee_id]
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items

    def get_range(self, employee_id: str, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        items = [
            r
            for (emp, day), r in list(self._by_key.items())
            if emp == employee_id and start_date <= day <= end_date
        ]
        items.sort(key=lambda r: r.work_date)
        return items

    def delete_all_for_employee(self, employee_id: str) -> int:
        with self._lock:
            keys = [k for k in self._by_key if k[0] == employee_id]
            for k in keys:
                del self._by_key[k]
            return len(keys)
