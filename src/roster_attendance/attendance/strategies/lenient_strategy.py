from __future__ import annotations

from ...core.enums import AttendanceStatus, PolicyKind
from .base import AttendanceStrategy


class LenientStrategy(AttendanceStrategy):
    """Unconditional presence credit (virtual or optional sessions); tolerance is ignored."""

    kind = PolicyKind.LENIENT

    def classify(self, marked_minute: int, scheduled_start: int, tolerance_minutes: int) -> AttendanceStatus:
        return AttendanceStatus.PRESENT
