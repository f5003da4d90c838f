from __future__ import annotations

from abc import ABC, abstractmethod

from ...common.datetime_utils import minutes_between
from ...core.enums import AttendanceStatus, PolicyKind


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how a marked time becomes an attendance status."""

    kind: PolicyKind

    @abstractmethod
    def classify(self, marked_minute: int, scheduled_start: int, tolerance_minutes: int) -> AttendanceStatus:
        raise NotImplementedError

    @property
    def name(self) -> str:
        return type(self).__name__

    @staticmethod
    def lateness(marked_minute: int, scheduled_start: int) -> int:
        """Minutes late; arriving early counts as on time."""
        return max(minutes_between(marked_minute, scheduled_start), 0)


class ThresholdStrategy(AttendanceStrategy):
    """PRESENT within tolerance, LATE up to tolerance * late_multiplier, ABSENT beyond."""

    @property
    @abstractmethod
    def late_multiplier(self) -> int:
        raise NotImplementedError

    def classify(self, marked_minute: int, scheduled_start: int, tolerance_minutes: int) -> AttendanceStatus:
        diff = self.lateness(marked_minute, scheduled_start)
        if diff <= tolerance_minutes:
            return AttendanceStatus.PRESENT
        if diff <= tolerance_minutes * self.late_multiplier:
            return AttendanceStatus.LATE
        return AttendanceStatus.ABSENT
