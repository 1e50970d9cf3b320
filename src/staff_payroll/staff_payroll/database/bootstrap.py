from __future__ import annotations

import logging
from typing import Iterable

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS staff_members (
    employee_id VARCHAR(64) NOT NULL PRIMARY KEY,
    name VARCHAR(255) NOT NULL,
    phone VARCHAR(32) NOT NULL,
    email VARCHAR(255) NULL,
    position VARCHAR(255) NOT NULL,
    hire_date DATE NOT NULL,
    address TEXT NULL,
    emergency_contact VARCHAR(64) NULL,
    notes TEXT NULL,
    is_active TINYINT(1) NOT NULL DEFAULT 1,
    monthly_salary DECIMAL(14, 2) NOT NULL,
    basic_percent DECIMAL(6, 3) NOT NULL DEFAULT 100,
    hra_percent DECIMAL(6, 3) NOT NULL DEFAULT 0,
    allowances_amount DECIMAL(14, 2) NOT NULL DEFAULT 0,
    include_pf TINYINT(1) NOT NULL DEFAULT 0,
    pf_percent DECIMAL(6, 3) NOT NULL DEFAULT 12,
    include_esi TINYINT(1) NOT NULL DEFAULT 0,
    esi_percent DECIMAL(6, 3) NOT NULL DEFAULT 0.75,
    allowed_leave_days INT NOT NULL DEFAULT 2,
    created_at DATETIME NOT NULL,
    updated_at DATETIME NOT NULL
);

CREATE TABLE IF NOT EXISTS staff_attendance (
    record_id VARCHAR(80) NOT NULL PRIMARY KEY,
    employee_id VARCHAR(64) NOT NULL,
    work_date DATE NOT NULL,
    status ENUM('present', 'half', 'leave', 'absent') NOT NULL,
    created_at DATETIME NOT NULL,
    updated_at DATETIME NOT NULL,
    UNIQUE KEY uq_attendance_employee_date (employee_id, work_date),
    KEY ix_attendance_employee (employee_id)
);
"""


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, sql: str = SCHEMA_SQL) -> None:
    """Idempotent: every statement is CREATE ... IF NOT EXISTS."""

    ensure_database_exists(conn_factory)
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema ready on database %s", conn_factory.config.database)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
