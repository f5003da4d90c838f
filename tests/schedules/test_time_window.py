from __future__ import annotations

import pytest

from roster_attendance.core.enums import Weekday
from roster_attendance.core.exceptions import ConfigurationError
from roster_attendance.schedules.model import MarkingMoment, TimeWindow, days_until, next_window

from conftest import MONDAY


def w(day: str, start: str, end: str) -> TimeWindow:
    return TimeWindow.parse(day, start, end)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (w("MONDAY", "08:00", "10:00"), w("MONDAY", "09:00", "11:00"), True),
        (w("MONDAY", "08:00", "10:00"), w("MONDAY", "10:00", "12:00"), False),
        (w("MONDAY", "08:00", "12:00"), w("MONDAY", "09:00", "10:00"), True),
        (w("MONDAY", "08:00", "10:00"), w("TUESDAY", "08:00", "10:00"), False),
        (w("SATURDAY", "07:00", "07:01"), w("SATURDAY", "06:00", "07:00"), False),
    ],
)
def test_overlaps_is_symmetric(a, b, expected):
    assert a.overlaps(b) is expected
    assert b.overlaps(a) is expected


def test_window_overlaps_itself():
    a = w("WEDNESDAY", "14:00", "15:30")
    assert a.overlaps(a)
    assert a.overlaps(w("WEDNESDAY", "14:00", "15:30"))


def test_contains_includes_both_bounds():
    a = w("MONDAY", "08:00", "10:00")
    assert a.contains(Weekday.MONDAY, 8 * 60)
    assert a.contains(Weekday.MONDAY, 10 * 60)
    assert not a.contains(Weekday.MONDAY, 10 * 60 + 1)
    assert not a.contains(Weekday.MONDAY, 8 * 60 - 1)
    assert not a.contains(Weekday.TUESDAY, 9 * 60)


@pytest.mark.parametrize(
    "day, start, end",
    [
        (Weekday.MONDAY, 600, 600),
        (Weekday.MONDAY, 601, 600),
        (Weekday.MONDAY, -1, 60),
        (Weekday.MONDAY, 0, 1440),
        (Weekday.SUNDAY, 480, 600),
        (9, 480, 600),
    ],
)
def test_malformed_window_rejected(day, start, end):
    with pytest.raises(ConfigurationError):
        TimeWindow(day, start, end)


def test_parse_rejects_bad_strings():
    with pytest.raises(ConfigurationError):
        TimeWindow.parse("FUNDAY", "08:00", "09:00")
    with pytest.raises(ConfigurationError):
        TimeWindow.parse("MONDAY", "8am", "09:00")


def test_parse_and_label():
    a = TimeWindow.parse("friday", "07:05", "08:45")
    assert a == TimeWindow(Weekday.FRIDAY, 425, 525)
    assert a.label() == "FRIDAY 07:05-08:45"


def test_marking_moment_from_date():
    from datetime import datetime, time

    m = MarkingMoment.of(MONDAY, time(8, 15))
    assert m.day_of_week == Weekday.MONDAY
    assert m.minute == 495
    assert MarkingMoment.from_datetime(datetime(2026, 2, 2, 8, 15, 42)) == m


def test_next_window_prefers_later_today():
    windows = [w("MONDAY", "08:00", "10:00"), w("MONDAY", "14:00", "16:00"), w("TUESDAY", "07:00", "08:00")]

    assert next_window(windows, Weekday.MONDAY, 9 * 60) == w("MONDAY", "14:00", "16:00")
    assert next_window(windows, Weekday.MONDAY, 17 * 60) == w("TUESDAY", "07:00", "08:00")


def test_next_window_wraps_around_the_week():
    windows = [w("MONDAY", "08:00", "10:00"), w("WEDNESDAY", "08:00", "10:00")]

    assert next_window(windows, Weekday.SATURDAY, 12 * 60) == w("MONDAY", "08:00", "10:00")
    assert next_window(windows, Weekday.SUNDAY, 0) == w("MONDAY", "08:00", "10:00")
    assert days_until(w("MONDAY", "08:00", "10:00"), Weekday.SATURDAY, 12 * 60) == 2


def test_window_already_started_today_comes_back_next_week():
    only = w("MONDAY", "08:00", "10:00")

    assert next_window([only], Weekday.MONDAY, 8 * 60) == only
    assert days_until(only, Weekday.MONDAY, 8 * 60) == 7
    assert days_until(only, Weekday.MONDAY, 7 * 60 + 59) == 0
    assert next_window([], Weekday.MONDAY, 0) is None
