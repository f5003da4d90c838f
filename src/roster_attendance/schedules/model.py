from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Iterable, Optional

from ..common.datetime_utils import format_minutes, parse_hhmm, to_minutes
from ..core.constants import MINUTES_PER_DAY
from ..core.enums import Weekday
from ..core.exceptions import ConfigurationError, ValidationError


@dataclass(frozen=True)
class TimeWindow:
    """A weekly meeting slot of a group: one weekday, start/end as minutes since midnight."""

    day_of_week: Weekday
    start_minute: int
    end_minute: int

    def __post_init__(self) -> None:
        try:
            day = Weekday(self.day_of_week)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown weekday: {self.day_of_week!r}") from exc
        if day == Weekday.SUNDAY:
            raise ConfigurationError("Groups cannot meet on Sunday")
        object.__setattr__(self, "day_of_week", day)

        for name in ("start_minute", "end_minute"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < MINUTES_PER_DAY:
                raise ConfigurationError(f"{name} must be within 0..{MINUTES_PER_DAY - 1}, got {value!r}")
        if self.start_minute >= self.end_minute:
            raise ConfigurationError(
                f"Window start {format_minutes(self.start_minute)} must be before end {format_minutes(self.end_minute)}"
            )

    @classmethod
    def parse(cls, day_of_week: Weekday | str, start: str, end: str) -> "TimeWindow":
        """Build a window from ``HH:MM`` strings, e.g. ``TimeWindow.parse("MONDAY", "08:00", "10:00")``."""
        if isinstance(day_of_week, str):
            try:
                day_of_week = Weekday[day_of_week.strip().upper()]
            except KeyError as exc:
                raise ConfigurationError(f"Unknown weekday: {day_of_week!r}") from exc
        try:
            start_t, end_t = parse_hhmm(start), parse_hhmm(end)
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc
        return cls(day_of_week, to_minutes(start_t), to_minutes(end_t))

    def overlaps(self, other: "TimeWindow") -> bool:
        # Half-open: windows that only touch (end == other.start) do not overlap.
        return (
            self.day_of_week == other.day_of_week
            and self.start_minute < other.end_minute
            and other.start_minute < self.end_minute
        )

    def contains(self, day_of_week: Weekday, minute: int) -> bool:
        return day_of_week == self.day_of_week and self.start_minute <= minute <= self.end_minute

    def label(self) -> str:
        return f"{self.day_of_week.name} {format_minutes(self.start_minute)}-{format_minutes(self.end_minute)}"


@dataclass(frozen=True)
class MarkingMoment:
    """The instant a student tries to mark attendance."""

    day_of_week: Weekday
    minute: int
    on_date: date

    @classmethod
    def of(cls, on_date: date, at: time) -> "MarkingMoment":
        return cls(day_of_week=Weekday.of(on_date), minute=to_minutes(at), on_date=on_date)

    @classmethod
    def from_datetime(cls, value: datetime) -> "MarkingMoment":
        return cls.of(value.date(), value.time())


def days_until(window: TimeWindow, day_of_week: Weekday, minute: int) -> int:
    """Whole days from ``(day_of_week, minute)`` until the window next starts, 0..7."""
    ahead = (window.day_of_week - day_of_week) % 7
    if ahead == 0 and window.start_minute <= minute:
        return 7
    return ahead


def next_window(windows: Iterable[TimeWindow], day_of_week: Weekday, minute: int) -> Optional[TimeWindow]:
    """The window that starts soonest after ``(day_of_week, minute)``.

    Later today wins first, then the following days with the week wrapping
    around, so a Saturday afternoon looks ahead to Monday. A window that has
    already started today comes back only after a full week.
    """
    windows = list(windows)
    if not windows:
        return None
    return min(windows, key=lambda w: (days_until(w, day_of_week, minute), w.start_minute))
