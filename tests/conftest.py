from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from roster_attendance.attendance.model import AttendanceRecord
from roster_attendance.core.exceptions import DuplicateRecordError
from roster_attendance.enrollments.model import Enrollment, Term
from roster_attendance.groups.model import GroupPolicy
from roster_attendance.schedules.model import TimeWindow

TERM = Term(semester=1, year=2026)
MONDAY = date(2026, 2, 2)
TUESDAY = date(2026, 2, 3)


class InMemoryStore:
    """Fake of every store Protocol the engine consumes."""

    def __init__(self):
        self.windows: dict[int, list[TimeWindow]] = {}
        self.policies: dict[int, GroupPolicy] = {}
        self.terms: dict[int, Term] = {}
        self.enrollments: list[Enrollment] = []
        self.records: dict[tuple[int, int, date], AttendanceRecord] = {}
        self.reads = 0

    # helpers for arranging tests
    def add_group(self, group_id: int, windows=(), *, policy: Optional[GroupPolicy] = None, term: Optional[Term] = TERM):
        self.windows[group_id] = list(windows)
        if policy is not None:
            self.policies[group_id] = policy
        if term is not None:
            self.terms[group_id] = term

    def enroll(self, student_id: int, group_id: int, term: Term = TERM):
        self.enrollments.append(Enrollment(student_id=student_id, group_id=group_id, term=term, enrolled_on=date(2026, 1, 20)))

    # GroupRepository
    def group_exists(self, group_id: int) -> bool:
        return group_id in self.windows

    def get_group_windows(self, group_id: int):
        self.reads += 1
        return list(self.windows.get(group_id, []))

    def get_group_policy(self, group_id: int) -> Optional[GroupPolicy]:
        return self.policies.get(group_id)

    def get_group_term(self, group_id: int) -> Optional[Term]:
        return self.terms.get(group_id)

    def save_group_policy(self, group_id: int, policy: GroupPolicy) -> None:
        self.policies[group_id] = policy

    def replace_group_windows(self, group_id: int, windows) -> None:
        self.windows[group_id] = list(windows)

    # EnrollmentRepository
    def get_active_enrollments(self, student_id: int):
        return [e for e in self.enrollments if e.student_id == student_id]

    def save_enrollment(self, enrollment: Enrollment) -> None:
        self.enrollments.append(enrollment)

    # AttendanceRepository
    def has_attendance_for_date(self, student_id: int, group_id: int, attend_date: date) -> bool:
        return (student_id, group_id, attend_date) in self.records

    def save_attendance_record(self, record: AttendanceRecord) -> None:
        key = (record.student_id, record.group_id, record.attend_date)
        if key in self.records:
            raise DuplicateRecordError(f"duplicate attendance {key}")
        self.records[key] = record

    def list_attendance(self, student_id: int, group_id: Optional[int] = None):
        return [
            r for r in self.records.values()
            if r.student_id == student_id and (group_id is None or r.group_id == group_id)
        ]


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def monday_8_to_10() -> TimeWindow:
    return TimeWindow.parse("MONDAY", "08:00", "10:00")
