from __future__ import annotations

from collections import Counter
from typing import Optional, Sequence

from ..common.validators import require_positive_id
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceSummary
from .repository import AttendanceRepository


class AttendanceHistoryService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def history(self, student_id: int, group_id: Optional[int] = None) -> Sequence[AttendanceRecord]:
        """Records of a student, newest first, optionally limited to one group."""
        student_id = require_positive_id(student_id, "Student id")
        if group_id is not None:
            group_id = require_positive_id(group_id, "Group id")
        rows = list(self._attendance.list_attendance(student_id, group_id))
        rows.sort(key=lambda r: (r.attend_date, r.marked_time), reverse=True)
        return rows

    def summary(self, student_id: int, group_id: int) -> AttendanceSummary:
        counts = Counter(r.status for r in self.history(student_id, group_id))
        return AttendanceSummary(
            student_id=int(student_id),
            group_id=int(group_id),
            present=counts[AttendanceStatus.PRESENT],
            late=counts[AttendanceStatus.LATE],
            absent=counts[AttendanceStatus.ABSENT],
        )
