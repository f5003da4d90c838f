from __future__ import annotations

from ..enrollments.mysql_enrollment_repository import MySQLEnrollmentRepository
from ..groups.mysql_group_repository import MySQLGroupRepository
from .mysql_attendance_repository import MySQLAttendanceRepository


class MySQLAttendanceStore(MySQLEnrollmentRepository, MySQLGroupRepository, MySQLAttendanceRepository):
    """The three MySQL repositories behind one AttendanceStore object."""
