from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional, Tuple

from ..core.enums import AttendanceStatus, EligibilityResult, PolicyKind
from ..schedules.model import TimeWindow


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one mark per (student, group, date). Never mutated once saved."""

    student_id: int
    group_id: int
    attend_date: date
    marked_time: time
    status: AttendanceStatus
    policy_kind: Optional[PolicyKind] = None


_ERROR_MESSAGES = {
    EligibilityResult.NOT_ENROLLED: "Student is not enrolled in this group",
    EligibilityResult.NO_MATCHING_WINDOW: "The group does not meet at this time",
    EligibilityResult.ALREADY_MARKED: "Attendance was already marked for this date",
}


@dataclass(frozen=True)
class AttendanceError:
    """Expected business refusal of a marking attempt (not an exception)."""

    kind: EligibilityResult
    message: str

    @classmethod
    def from_eligibility(cls, result: EligibilityResult) -> "AttendanceError":
        if result == EligibilityResult.ELIGIBLE:
            raise ValueError("ELIGIBLE is not an error")
        return cls(kind=result, message=_ERROR_MESSAGES[result])


@dataclass(frozen=True)
class MarkResult:
    record: Optional[AttendanceRecord] = None
    error: Optional[AttendanceError] = None

    @property
    def ok(self) -> bool:
        return self.record is not None


@dataclass(frozen=True)
class ClassificationPreview:
    """What a strategy would decide, without eligibility checks or persistence."""

    status: AttendanceStatus
    strategy_name: str
    tolerance_minutes: int
    diff_minutes: int


@dataclass(frozen=True)
class AttendanceSummary:
    student_id: int
    group_id: int
    present: int
    late: int
    absent: int

    @property
    def total(self) -> int:
        return self.present + self.late + self.absent

    @property
    def attendance_rate(self) -> float:
        if not self.total:
            return 0.0
        return (self.present + self.late) / self.total


@dataclass(frozen=True)
class UpcomingGroup:
    group_id: int
    next_window: Optional[TimeWindow]
    days_ahead: Optional[int]


@dataclass(frozen=True)
class MarkableGroups:
    """A student's enrolled groups split by whether a mark would be accepted right now.

    ``upcoming`` is ordered by when each group next meets; groups without any
    window come last.
    """

    available: Tuple[int, ...]
    upcoming: Tuple[UpcomingGroup, ...]
