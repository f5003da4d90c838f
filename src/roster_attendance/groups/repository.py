from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..enrollments.model import Term
from ..schedules.model import TimeWindow
from .model import GroupPolicy


class GroupRepository(Protocol):
    def group_exists(self, group_id: int) -> bool:
        raise NotImplementedError

    def get_group_windows(self, group_id: int) -> Sequence[TimeWindow]:
        raise NotImplementedError

    def get_group_policy(self, group_id: int) -> Optional[GroupPolicy]:
        """Stored policy, or None when the group was never configured."""

        raise NotImplementedError

    def get_group_term(self, group_id: int) -> Optional[Term]:
        raise NotImplementedError

    def save_group_policy(self, group_id: int, policy: GroupPolicy) -> None:
        raise NotImplementedError

    def replace_group_windows(self, group_id: int, windows: Sequence[TimeWindow]) -> None:
        raise NotImplementedError
