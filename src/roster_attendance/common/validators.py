from __future__ import annotations

from datetime import date, datetime, time

from ..core.exceptions import ValidationError
from .datetime_utils import parse_hhmm, parse_iso_date


def require_positive_id(value, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is not valid")
    try:
        ident = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} is not valid") from exc
    if ident <= 0 or ident != value:
        raise ValidationError(f"{field_name} must be a positive integer")
    return ident


def require_date(value, field_name: str = "Date") -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value.strip())
    raise ValidationError(f"{field_name} is not valid")


def require_time(value, field_name: str = "Time") -> time:
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)
    if isinstance(value, str):
        return parse_hhmm(value)
    raise ValidationError(f"{field_name} is not valid")
