"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOLERANCE_MINUTES = 10
MIN_TOLERANCE_MINUTES = 0
MAX_TOLERANCE_MINUTES = 60

# STANDARD/STRICT: LATE up to tolerance * multiplier, ABSENT beyond.
STANDARD_LATE_MULTIPLIER = 3
STRICT_LATE_MULTIPLIER = 3

MINUTES_PER_DAY = 24 * 60
