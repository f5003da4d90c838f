from __future__ import annotations

import re
from datetime import date, datetime, time

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import ValidationError

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_HHMM = re.compile(r"^([01][0-9]|2[0-3]):([0-5][0-9])$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    message = f"Invalid date {value!r}, expected YYYY-MM-DD"
    if not isinstance(value, str) or not _ISO_DATE.match(value.strip()):
        raise ValidationError(message)
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError as exc:
        raise ValidationError(message) from exc


def parse_hhmm(value: str) -> time:
    """Parse a 24h ``HH:MM`` string into a time."""
    m = _HHMM.match(value.strip()) if isinstance(value, str) else None
    if not m:
        raise ValidationError(f"Invalid time {value!r}, expected HH:MM")
    return time(hour=int(m.group(1)), minute=int(m.group(2)))


def to_minutes(value: time) -> int:
    """Minutes since midnight; seconds are dropped."""
    return value.hour * 60 + value.minute


def from_minutes(minutes: int) -> time:
    if not 0 <= int(minutes) < MINUTES_PER_DAY:
        raise ValueError(f"Minute of day out of range: {minutes!r}")
    return time(hour=int(minutes) // 60, minute=int(minutes) % 60)


def format_minutes(minutes: int) -> str:
    return f"{int(minutes) // 60:02d}:{int(minutes) % 60:02d}"


def minutes_between(marked_minute: int, scheduled_start: int) -> int:
    """Signed difference; negative when marked before the scheduled start."""
    return int(marked_minute) - int(scheduled_start)
