from __future__ import annotations

from ...core.constants import STRICT_LATE_MULTIPLIER
from ...core.enums import PolicyKind
from .base import ThresholdStrategy


class StrictStrategy(ThresholdStrategy):
    """Strict policy.

    Note: the multiplier currently equals STANDARD's, so both classify the same
    way. Change STRICT_LATE_MULTIPLIER once a stricter rule is agreed on.
    """

    kind = PolicyKind.STRICT
    late_multiplier = STRICT_LATE_MULTIPLIER
