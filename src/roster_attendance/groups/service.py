from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from ..common.validators import require_positive_id
from ..core.enums import PolicyKind
from ..core.exceptions import ConfigurationError, ValidationError
from ..schedules.model import TimeWindow
from .model import DEFAULT_POLICY, Group, GroupPolicy
from .repository import GroupRepository

logger = logging.getLogger(__name__)

# Recommended tolerance ranges shown to administrators, inclusive.
TOLERANCE_BANDS: Tuple[Tuple[str, int, int], ...] = (
    ("Very strict", 0, 5),
    ("Strict", 6, 10),
    ("Standard", 11, 15),
    ("Flexible", 16, 25),
    ("Very flexible", 26, 60),
)


def band_for(tolerance_minutes: int) -> Optional[str]:
    for name, low, high in TOLERANCE_BANDS:
        if low <= tolerance_minutes <= high:
            return name
    return None


class GroupConfigService:
    """Administrator-side configuration of a group's schedule and classification policy.

    Misconfiguration fails here, at configuration time, never later while marking.
    """

    def __init__(self, groups: GroupRepository, *, default_policy: GroupPolicy = DEFAULT_POLICY):
        self._groups = groups
        self._default_policy = default_policy

    def configure_policy(self, group_id: int, tolerance_minutes: int, policy_kind: PolicyKind | str) -> GroupPolicy:
        group_id = self._require_group(group_id)
        if isinstance(policy_kind, str):
            policy_kind = policy_kind.strip().upper()
        policy = GroupPolicy(tolerance_minutes=tolerance_minutes, policy_kind=policy_kind)

        self._groups.save_group_policy(group_id, policy)
        logger.info(
            "Group %s policy set to %s, tolerance %s min (%s)",
            group_id,
            policy.policy_kind.value,
            policy.tolerance_minutes,
            band_for(policy.tolerance_minutes),
        )
        return policy

    def configure_windows(self, group_id: int, windows: Iterable[TimeWindow]) -> Tuple[TimeWindow, ...]:
        group_id = self._require_group(group_id)
        windows = tuple(windows)
        for w in windows:
            if not isinstance(w, TimeWindow):
                raise ConfigurationError(f"Not a time window: {w!r}")

        for i, a in enumerate(windows):
            for b in windows[i + 1:]:
                if a.overlaps(b):
                    raise ConfigurationError(f"Windows {a.label()} and {b.label()} overlap")

        ordered = tuple(sorted(windows, key=lambda w: (w.day_of_week, w.start_minute)))
        self._groups.replace_group_windows(group_id, ordered)
        logger.info("Group %s schedule set to %s", group_id, ", ".join(w.label() for w in ordered) or "(none)")
        return ordered

    def current_policy(self, group_id: int) -> GroupPolicy:
        group_id = require_positive_id(group_id, "Group id")
        return self._groups.get_group_policy(group_id) or self._default_policy

    def get_group(self, group_id: int) -> Group:
        """Current windows, effective policy and term of an existing group."""
        group_id = self._require_group(group_id)
        return Group(
            group_id=group_id,
            windows=tuple(self._groups.get_group_windows(group_id)),
            policy=self._groups.get_group_policy(group_id) or self._default_policy,
            term=self._groups.get_group_term(group_id),
        )

    def _require_group(self, group_id: int) -> int:
        group_id = require_positive_id(group_id, "Group id")
        if not self._groups.group_exists(group_id):
            raise ValidationError(f"Group {group_id} does not exist")
        return group_id
