from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Type

from ..core.enums import PolicyKind
from ..core.exceptions import ConfigurationError
from .strategies.base import AttendanceStrategy
from .strategies.lenient_strategy import LenientStrategy
from .strategies.standard_strategy import StandardStrategy
from .strategies.strict_strategy import StrictStrategy

STRATEGIES: Dict[PolicyKind, Type[AttendanceStrategy]] = {
    PolicyKind.LENIENT: LenientStrategy,
    PolicyKind.STANDARD: StandardStrategy,
    PolicyKind.STRICT: StrictStrategy,
}


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: pick the strategy named by a group's persisted policy kind."""

    def for_policy(self, kind: PolicyKind | str) -> AttendanceStrategy:
        try:
            return STRATEGIES[PolicyKind(kind)]()
        except (KeyError, ValueError) as exc:
            raise ConfigurationError(f"No classification strategy for policy {kind!r}") from exc
