from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def has_attendance_for_date(self, student_id: int, group_id: int, attend_date: date) -> bool:
        raise NotImplementedError

    def save_attendance_record(self, record: AttendanceRecord) -> None:
        """Insert the record atomically.

        Raises DuplicateRecordError when (student_id, group_id, attend_date) already exists.
        """

        raise NotImplementedError

    def list_attendance(self, student_id: int, group_id: Optional[int] = None) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
