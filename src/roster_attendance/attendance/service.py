from __future__ import annotations

import logging
from datetime import date, time
from typing import Optional

from ..common.datetime_utils import minutes_between, to_minutes
from ..common.validators import require_date, require_positive_id, require_time
from ..core.enums import EligibilityResult
from ..groups.model import DEFAULT_POLICY, GroupPolicy
from ..schedules.model import MarkingMoment
from .eligibility import EligibilityChecker
from .factory import AttendanceStrategyFactory
from .model import AttendanceError, AttendanceRecord, ClassificationPreview, MarkResult
from .store import AttendanceStore
from .strategies.base import AttendanceStrategy

logger = logging.getLogger(__name__)


class AttendanceContext:
    """Strategy Pattern context: checks eligibility, classifies with the group's policy, persists.

    The strategy is resolved on every call from the group's configuration. A fixed
    override can be bound with ``with_strategy`` (demo/test tooling) or passed per call.
    """

    def __init__(
        self,
        store: AttendanceStore,
        *,
        eligibility: EligibilityChecker | None = None,
        strategy_factory: AttendanceStrategyFactory | None = None,
        default_policy: GroupPolicy = DEFAULT_POLICY,
        strategy_override: AttendanceStrategy | None = None,
    ):
        self._store = store
        self._eligibility = eligibility or EligibilityChecker(store, store, store)
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._default_policy = default_policy
        self._override = strategy_override

    def with_strategy(self, strategy: AttendanceStrategy | None) -> "AttendanceContext":
        return AttendanceContext(
            self._store,
            eligibility=self._eligibility,
            strategy_factory=self._factory,
            default_policy=self._default_policy,
            strategy_override=strategy,
        )

    def resolve_policy(self, group_id: int) -> GroupPolicy:
        return self._store.get_group_policy(group_id) or self._default_policy

    def mark_attendance(
        self,
        student_id: int,
        group_id: int,
        attend_date: date | str,
        marked_time: time | str,
        *,
        strategy: AttendanceStrategy | None = None,
    ) -> MarkResult:
        student_id = require_positive_id(student_id, "Student id")
        group_id = require_positive_id(group_id, "Group id")
        attend_date = require_date(attend_date, "Attendance date")
        marked_time = require_time(marked_time, "Marked time")

        now = MarkingMoment.of(attend_date, marked_time)
        eligibility = self._eligibility.can_mark(student_id, group_id, now)
        if eligibility != EligibilityResult.ELIGIBLE:
            logger.info("Rejected mark student=%s group=%s on %s: %s", student_id, group_id, attend_date, eligibility.value)
            return MarkResult(error=AttendanceError.from_eligibility(eligibility))

        scheduled_start = self._scheduled_start(group_id, now)
        if scheduled_start is None:
            # Windows were reconfigured between the check and this read.
            return MarkResult(error=AttendanceError.from_eligibility(EligibilityResult.NO_MATCHING_WINDOW))
        policy = self.resolve_policy(group_id)
        chosen = strategy or self._override or self._factory.for_policy(policy.policy_kind)

        status = chosen.classify(now.minute, scheduled_start, policy.tolerance_minutes)
        logger.debug(
            "Classified with %s: diff=%s tolerance=%s -> %s",
            chosen.name,
            minutes_between(now.minute, scheduled_start),
            policy.tolerance_minutes,
            status.value,
        )

        record = AttendanceRecord(
            student_id=student_id,
            group_id=group_id,
            attend_date=attend_date,
            marked_time=marked_time,
            status=status,
            policy_kind=chosen.kind,
        )
        self._store.save_attendance_record(record)
        logger.info("Marked student=%s group=%s on %s as %s", student_id, group_id, attend_date, status.value)
        return MarkResult(record=record)

    def preview(
        self,
        group_id: int,
        marked_time: time | str,
        scheduled_start: time | str,
        *,
        strategy: AttendanceStrategy | None = None,
    ) -> ClassificationPreview:
        """Classify a simulated mark without checking the schedule or saving anything."""
        group_id = require_positive_id(group_id, "Group id")
        marked = to_minutes(require_time(marked_time, "Marked time"))
        start = to_minutes(require_time(scheduled_start, "Scheduled start"))

        policy = self.resolve_policy(group_id)
        chosen = strategy or self._override or self._factory.for_policy(policy.policy_kind)
        return ClassificationPreview(
            status=chosen.classify(marked, start, policy.tolerance_minutes),
            strategy_name=chosen.name,
            tolerance_minutes=policy.tolerance_minutes,
            diff_minutes=minutes_between(marked, start),
        )

    def _scheduled_start(self, group_id: int, now: MarkingMoment) -> Optional[int]:
        matching = [w for w in self._store.get_group_windows(group_id) if w.contains(now.day_of_week, now.minute)]
        if not matching:
            return None
        return min(w.start_minute for w in matching)
