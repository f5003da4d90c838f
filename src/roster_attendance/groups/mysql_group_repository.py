from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import from_minutes, to_minutes
from ..core.enums import PolicyKind, Weekday
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from ..enrollments.model import Term
from ..schedules.model import TimeWindow
from .model import GroupPolicy
from .repository import GroupRepository


def row_to_window(r: dict) -> TimeWindow:
    return TimeWindow(
        day_of_week=Weekday(int(r["day_of_week"])),
        start_minute=to_minutes(normalize_mysql_time(r["start_time"])),
        end_minute=to_minutes(normalize_mysql_time(r["end_time"])),
    )


class MySQLGroupRepository(GroupRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def group_exists(self, group_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM class_groups WHERE group_id=%s", (int(group_id),))
            return fetchone(cur) is not None

    def get_group_windows(self, group_id: int) -> Sequence[TimeWindow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT day_of_week, start_time, end_time
                FROM group_windows
                WHERE group_id=%s
                ORDER BY day_of_week, start_time
                """,
                (int(group_id),),
            )
            return [row_to_window(r) for r in fetchall(cur)]

    def get_group_policy(self, group_id: int) -> Optional[GroupPolicy]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT tolerance_minutes, policy_kind FROM class_groups WHERE group_id=%s",
                (int(group_id),),
            )
            r = fetchone(cur)
            if not r or r.get("tolerance_minutes") is None or not r.get("policy_kind"):
                return None
            return GroupPolicy(tolerance_minutes=int(r["tolerance_minutes"]), policy_kind=PolicyKind(r["policy_kind"]))

    def get_group_term(self, group_id: int) -> Optional[Term]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT semester, year FROM class_groups WHERE group_id=%s", (int(group_id),))
            r = fetchone(cur)
            if not r or r.get("semester") is None or r.get("year") is None:
                return None
            return Term(semester=int(r["semester"]), year=int(r["year"]))

    def save_group_policy(self, group_id: int, policy: GroupPolicy) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE class_groups SET tolerance_minutes=%s, policy_kind=%s WHERE group_id=%s",
                (int(policy.tolerance_minutes), policy.policy_kind.value, int(group_id)),
            )

    def replace_group_windows(self, group_id: int, windows: Sequence[TimeWindow]) -> None:
        # One transaction: readers never see a half-replaced schedule.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM group_windows WHERE group_id=%s", (int(group_id),))
            for w in windows:
                cur.execute(
                    """
                    INSERT INTO group_windows(group_id, day_of_week, start_time, end_time)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (int(group_id), int(w.day_of_week), from_minutes(w.start_minute), from_minutes(w.end_minute)),
                )
