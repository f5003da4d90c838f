from __future__ import annotations

import logging
from datetime import date

from ..common.validators import require_date, require_positive_id
from ..core.exceptions import ScheduleConflictError, ValidationError
from ..groups.repository import GroupRepository
from ..schedules.conflict import ScheduleConflictDetector
from .model import Enrollment, Term
from .repository import EnrollmentRepository

logger = logging.getLogger(__name__)


class EnrollmentService:
    def __init__(
        self,
        enrollments: EnrollmentRepository,
        groups: GroupRepository,
        *,
        detector: ScheduleConflictDetector | None = None,
    ):
        self._enrollments = enrollments
        self._groups = groups
        self._detector = detector or ScheduleConflictDetector(enrollments, groups)

    def enroll(self, student_id: int, group_id: int, term: Term, enrolled_on: date | str) -> Enrollment:
        student_id = require_positive_id(student_id, "Student id")
        group_id = require_positive_id(group_id, "Group id")
        enrolled_on = require_date(enrolled_on, "Enrollment date")
        if not isinstance(term, Term):
            raise ValidationError("Term is not valid")
        if not self._groups.group_exists(group_id):
            raise ValidationError(f"Group {group_id} does not exist")

        group_term = self._groups.get_group_term(group_id)
        if group_term is not None and group_term != term:
            raise ValidationError(f"Group {group_id} belongs to term {group_term}, not {term}")

        for e in self._enrollments.get_active_enrollments(student_id):
            if e.group_id == group_id and e.term == term:
                raise ValidationError(f"Student {student_id} is already enrolled in group {group_id} for {term}")

        conflicts = self._detector.find_conflicts(student_id, group_id)
        if conflicts:
            logger.info("Enrollment of student %s in group %s rejected: %d conflict(s)", student_id, group_id, len(conflicts))
            raise ScheduleConflictError(
                "Schedule conflict: " + "; ".join(c.describe() for c in conflicts),
                conflicts,
            )

        enrollment = Enrollment(student_id=student_id, group_id=group_id, term=term, enrolled_on=enrolled_on)
        self._enrollments.save_enrollment(enrollment)
        logger.info("Enrolled student %s in group %s for %s", student_id, group_id, term)
        return enrollment
