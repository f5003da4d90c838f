from __future__ import annotations

from dataclasses import dataclass

from .attendance.eligibility import EligibilityChecker
from .attendance.factory import AttendanceStrategyFactory
from .attendance.history import AttendanceHistoryService
from .attendance.mysql_store import MySQLAttendanceStore
from .attendance.service import AttendanceContext
from .database.connection import DBConfig, DatabaseConnection
from .enrollments.service import EnrollmentService
from .groups.model import DEFAULT_POLICY, GroupPolicy
from .groups.service import GroupConfigService
from .schedules.conflict import ScheduleConflictDetector


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    store: MySQLAttendanceStore

    conflict_detector: ScheduleConflictDetector
    eligibility_checker: EligibilityChecker
    attendance_context: AttendanceContext
    history_service: AttendanceHistoryService
    group_config_service: GroupConfigService
    enrollment_service: EnrollmentService


def build_container(*, db_config: dict, default_policy: GroupPolicy = DEFAULT_POLICY) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    store = MySQLAttendanceStore(conn)

    conflict_detector = ScheduleConflictDetector(store, store)
    eligibility_checker = EligibilityChecker(store, store, store)
    attendance_context = AttendanceContext(
        store,
        eligibility=eligibility_checker,
        strategy_factory=AttendanceStrategyFactory(),
        default_policy=default_policy,
    )

    return Container(
        conn=conn,
        store=store,
        conflict_detector=conflict_detector,
        eligibility_checker=eligibility_checker,
        attendance_context=attendance_context,
        history_service=AttendanceHistoryService(store),
        group_config_service=GroupConfigService(store, default_policy=default_policy),
        enrollment_service=EnrollmentService(store, store, detector=conflict_detector),
    )
