from datetime import date, datetime, time

import pytest

from roster_attendance.common.validators import require_date, require_time
from roster_attendance.core.exceptions import ValidationError


def test_require_date_accepts_padded_iso_dates_and_dates():
    assert require_date("2026-02-02") == date(2026, 2, 2)
    assert require_date(date(2026, 2, 2)) == date(2026, 2, 2)
    assert require_date(datetime(2026, 2, 2, 9, 30)) == date(2026, 2, 2)


@pytest.mark.parametrize("value", ["2026-2-2", "2026-02-2", "26-02-02", "2026/02/02", "2026-02-30", "", None, 20260202])
def test_require_date_rejects_other_formats(value):
    with pytest.raises(ValidationError):
        require_date(value)


@pytest.mark.parametrize("value", ["8:00", "24:00", "08:60", "0800"])
def test_require_time_is_as_strict_as_dates(value):
    with pytest.raises(ValidationError):
        require_time(value)


def test_require_time_drops_seconds():
    assert require_time(time(8, 5, 59)) == time(8, 5)
    assert require_time("08:05") == time(8, 5)
