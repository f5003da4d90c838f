from __future__ import annotations

from ...core.constants import STANDARD_LATE_MULTIPLIER
from ...core.enums import PolicyKind
from .base import ThresholdStrategy


class StandardStrategy(ThresholdStrategy):
    """Default policy: LATE up to three times the tolerance."""

    kind = PolicyKind.STANDARD
    late_multiplier = STANDARD_LATE_MULTIPLIER
