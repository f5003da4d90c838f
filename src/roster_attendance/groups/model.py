from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..core.constants import DEFAULT_TOLERANCE_MINUTES, MAX_TOLERANCE_MINUTES, MIN_TOLERANCE_MINUTES
from ..core.enums import PolicyKind
from ..core.exceptions import ConfigurationError
from ..enrollments.model import Term
from ..schedules.model import TimeWindow


@dataclass(frozen=True)
class GroupPolicy:
    """How a group classifies marks: tolerance in minutes plus the policy kind."""

    tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES
    policy_kind: PolicyKind = PolicyKind.STANDARD

    def __post_init__(self) -> None:
        tol = self.tolerance_minutes
        if isinstance(tol, bool) or not isinstance(tol, int):
            raise ConfigurationError(f"Tolerance must be an integer, got {tol!r}")
        if not MIN_TOLERANCE_MINUTES <= tol <= MAX_TOLERANCE_MINUTES:
            raise ConfigurationError(
                f"Tolerance must be between {MIN_TOLERANCE_MINUTES} and {MAX_TOLERANCE_MINUTES} minutes, got {tol}"
            )
        try:
            object.__setattr__(self, "policy_kind", PolicyKind(self.policy_kind))
        except ValueError as exc:
            valid = ", ".join(k.value for k in PolicyKind)
            raise ConfigurationError(f"Unknown policy {self.policy_kind!r}. Valid values: {valid}") from exc


DEFAULT_POLICY = GroupPolicy()


@dataclass(frozen=True)
class Group:
    """Domain entity: a scheduled class group."""

    group_id: int
    windows: Tuple[TimeWindow, ...] = ()
    policy: GroupPolicy = field(default=DEFAULT_POLICY)
    term: Optional[Term] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "windows", tuple(self.windows))
