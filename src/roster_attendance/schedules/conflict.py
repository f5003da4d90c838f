from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List

from ..enrollments.repository import EnrollmentRepository
from ..groups.repository import GroupRepository
from .model import TimeWindow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowConflict:
    """A pair of colliding windows: one from an existing enrollment, one from the candidate group."""

    existing_group_id: int
    existing: TimeWindow
    candidate: TimeWindow

    def describe(self) -> str:
        return f"group {self.existing_group_id} {self.existing.label()} overlaps {self.candidate.label()}"


class ScheduleConflictDetector:
    """Detects timetable collisions between a candidate group and a student's active enrollments."""

    def __init__(self, enrollments: EnrollmentRepository, groups: GroupRepository):
        self._enrollments = enrollments
        self._groups = groups

    def has_conflict(self, student_id: int, candidate_group_id: int) -> bool:
        for conflict in self._iter_conflicts(student_id, candidate_group_id):
            logger.debug("Schedule conflict for student %s: %s", student_id, conflict.describe())
            return True
        return False

    def find_conflicts(self, student_id: int, candidate_group_id: int) -> List[WindowConflict]:
        return list(self._iter_conflicts(student_id, candidate_group_id))

    def _iter_conflicts(self, student_id: int, candidate_group_id: int) -> Iterator[WindowConflict]:
        candidate_windows = list(self._groups.get_group_windows(candidate_group_id))
        if not candidate_windows:
            return

        # Unknown candidate term: compare against every active enrollment.
        term = self._groups.get_group_term(candidate_group_id)
        other_group_ids: list[int] = []
        for e in self._enrollments.get_active_enrollments(student_id):
            if e.group_id == candidate_group_id:
                continue
            if term is not None and e.term != term:
                continue
            if e.group_id not in other_group_ids:
                other_group_ids.append(e.group_id)

        for group_id in other_group_ids:
            for existing in self._groups.get_group_windows(group_id):
                for candidate in candidate_windows:
                    if existing.overlaps(candidate):
                        yield WindowConflict(existing_group_id=group_id, existing=existing, candidate=candidate)
