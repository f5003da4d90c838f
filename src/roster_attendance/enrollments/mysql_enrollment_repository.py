from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Enrollment, Term
from .repository import EnrollmentRepository


class MySQLEnrollmentRepository(EnrollmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_active_enrollments(self, student_id: int) -> Sequence[Enrollment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, group_id, semester, year, enrolled_on
                FROM enrollments
                WHERE student_id=%s AND is_active=1
                ORDER BY enrolled_on, group_id
                """,
                (int(student_id),),
            )
            return [
                Enrollment(
                    student_id=int(r["student_id"]),
                    group_id=int(r["group_id"]),
                    term=Term(semester=int(r["semester"]), year=int(r["year"])),
                    enrolled_on=r["enrolled_on"],
                )
                for r in fetchall(cur)
            ]

    def save_enrollment(self, enrollment: Enrollment) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO enrollments(student_id, group_id, semester, year, enrolled_on)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (
                    int(enrollment.student_id),
                    int(enrollment.group_id),
                    int(enrollment.term.semester),
                    int(enrollment.term.year),
                    enrollment.enrolled_on,
                ),
            )
