from __future__ import annotations

import logging
from typing import List

from ..core.enums import EligibilityResult
from ..enrollments.repository import EnrollmentRepository
from ..groups.repository import GroupRepository
from ..schedules.model import MarkingMoment, days_until, next_window
from .model import MarkableGroups, UpcomingGroup
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class EligibilityChecker:
    """Decides whether a mark is accepted at all; the label it gets is the strategy's job."""

    def __init__(self, enrollments: EnrollmentRepository, groups: GroupRepository, attendance: AttendanceRepository):
        self._enrollments = enrollments
        self._groups = groups
        self._attendance = attendance

    def can_mark(self, student_id: int, group_id: int, now: MarkingMoment) -> EligibilityResult:
        result = self._check(student_id, group_id, now)
        logger.debug("can_mark student=%s group=%s at %s -> %s", student_id, group_id, now, result.value)
        return result

    def markable_groups(self, student_id: int, now: MarkingMoment) -> MarkableGroups:
        """Split the student's enrolled groups into markable now and upcoming."""
        group_ids = list(dict.fromkeys(e.group_id for e in self._enrollments.get_active_enrollments(student_id)))

        available: List[int] = []
        upcoming: List[UpcomingGroup] = []
        for group_id in group_ids:
            if self.can_mark(student_id, group_id, now) == EligibilityResult.ELIGIBLE:
                available.append(group_id)
                continue
            nxt = next_window(self._groups.get_group_windows(group_id), now.day_of_week, now.minute)
            days = days_until(nxt, now.day_of_week, now.minute) if nxt is not None else None
            upcoming.append(UpcomingGroup(group_id=group_id, next_window=nxt, days_ahead=days))

        upcoming.sort(key=lambda u: (u.next_window is None, u.days_ahead or 0, u.next_window.start_minute if u.next_window else 0))
        logger.debug("student=%s at %s: available=%s upcoming=%s", student_id, now, available, [u.group_id for u in upcoming])
        return MarkableGroups(available=tuple(available), upcoming=tuple(upcoming))

    def _check(self, student_id: int, group_id: int, now: MarkingMoment) -> EligibilityResult:
        enrolled = any(e.group_id == group_id for e in self._enrollments.get_active_enrollments(student_id))
        if not enrolled:
            return EligibilityResult.NOT_ENROLLED

        windows = self._groups.get_group_windows(group_id)
        if not any(w.contains(now.day_of_week, now.minute) for w in windows):
            return EligibilityResult.NO_MATCHING_WINDOW

        if self._attendance.has_attendance_for_date(student_id, group_id, now.on_date):
            return EligibilityResult.ALREADY_MARKED

        return EligibilityResult.ELIGIBLE
