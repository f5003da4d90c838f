from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus, PolicyKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def has_attendance_for_date(self, student_id: int, group_id: int, attend_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT 1 AS found
                FROM attendance_records
                WHERE student_id=%s AND group_id=%s AND attend_date=%s
                """,
                (int(student_id), int(group_id), attend_date),
            )
            return fetchone(cur) is not None

    def save_attendance_record(self, record: AttendanceRecord) -> None:
        # uq_attendance_day rejects a concurrent duplicate as DuplicateRecordError.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(student_id, group_id, attend_date, marked_time, status, policy_kind)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(record.student_id),
                    int(record.group_id),
                    record.attend_date,
                    record.marked_time,
                    record.status.value,
                    record.policy_kind.value if record.policy_kind else None,
                ),
            )

    def list_attendance(self, student_id: int, group_id: Optional[int] = None) -> Sequence[AttendanceRecord]:
        clauses = ["student_id=%s"]
        params: list[object] = [int(student_id)]
        if group_id is not None:
            clauses.append("group_id=%s")
            params.append(int(group_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT student_id, group_id, attend_date, marked_time, status, policy_kind
                FROM attendance_records
                WHERE {where}
                ORDER BY attend_date DESC, marked_time DESC
                """,
                tuple(params),
            )
            return [
                AttendanceRecord(
                    student_id=int(r["student_id"]),
                    group_id=int(r["group_id"]),
                    attend_date=r["attend_date"],
                    marked_time=normalize_mysql_time(r["marked_time"]),
                    status=AttendanceStatus(r["status"]),
                    policy_kind=PolicyKind(r["policy_kind"]) if r.get("policy_kind") else None,
                )
                for r in fetchall(cur)
            ]
