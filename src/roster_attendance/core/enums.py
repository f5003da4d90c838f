from __future__ import annotations

from datetime import date
from enum import Enum


class Weekday(int, Enum):
    """Day of week, aligned with ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def of(cls, value: date) -> "Weekday":
        return cls(value.weekday())


class AttendanceStatus(str, Enum):
    """Classification stored with every attendance record."""

    PRESENT = "PRESENT"
    LATE = "LATE"
    ABSENT = "ABSENT"


class PolicyKind(str, Enum):
    """Per-group classification policy, persisted with the group."""

    LENIENT = "LENIENT"
    STANDARD = "STANDARD"
    STRICT = "STRICT"


class EligibilityResult(str, Enum):
    """Outcome of the pre-marking checks, in evaluation order."""

    ELIGIBLE = "ELIGIBLE"
    NOT_ENROLLED = "NOT_ENROLLED"
    NO_MATCHING_WINDOW = "NO_MATCHING_WINDOW"
    ALREADY_MARKED = "ALREADY_MARKED"
