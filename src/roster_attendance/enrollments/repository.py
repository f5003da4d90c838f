from __future__ import annotations

from typing import Protocol, Sequence

from .model import Enrollment


class EnrollmentRepository(Protocol):
    def get_active_enrollments(self, student_id: int) -> Sequence[Enrollment]:
        """Enrollments of the student that are currently in force."""

        raise NotImplementedError

    def save_enrollment(self, enrollment: Enrollment) -> None:
        raise NotImplementedError
