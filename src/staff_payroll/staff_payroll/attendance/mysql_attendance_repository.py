from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, make_record_id
from .repository import AttendanceRepository

_COLUMNS = "record_id, employee_id, work_date, status, created_at, updated_at"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(r["record_id"]),
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        status=AttendanceStatus(r["status"]),
        created_at=r["created_at"],
        updated_at=r["updated_at"],
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM staff_attendance
                WHERE employee_id=%s AND work_date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(
        self,
        *,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
        now: datetime,
    ) -> AttendanceRecord:
        # Single statement on the unique (employee_id, work_date) key: concurrent
        # marks for the same day resolve as last-writer-wins.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO staff_attendance(record_id, employee_id, work_date, status, created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status), updated_at=VALUES(updated_at)
                """,
                (make_record_id(employee_id, work_date), employee_id, work_date, status.value, now, now),
            )
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM staff_attendance
                WHERE employee_id=%s AND work_date=%s
                """,
                (employee_id, work_date),
            )
            return _to_record(fetchone(cur))

    def delete(self, employee_id: str, work_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM staff_attendance WHERE employee_id=%s AND work_date=%s",
                (employee_id, work_date),
            )
            return cur.rowcount > 0

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM staff_attendance
                WHERE employee_id=%s
                ORDER BY work_date DESC
                """,
                (employee_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_range(self, employee_id: str, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM staff_attendance
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC
                """,
                (employee_id, start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def delete_all_for_employee(self, employee_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM staff_attendance WHERE employee_id=%s", (employee_id,))
            return int(cur.rowcount)
