from __future__ import annotations

from datetime import date

import pytest

from roster_attendance.core.exceptions import ScheduleConflictError, ValidationError
from roster_attendance.enrollments.model import Enrollment, Term
from roster_attendance.enrollments.service import EnrollmentService
from roster_attendance.schedules.model import TimeWindow

from conftest import TERM


@pytest.fixture
def svc(store, monday_8_to_10) -> EnrollmentService:
    store.add_group(1, [monday_8_to_10])
    store.add_group(2, [TimeWindow.parse("MONDAY", "09:00", "11:00")])
    store.add_group(3, [TimeWindow.parse("MONDAY", "10:00", "12:00")])
    return EnrollmentService(store, store)


def test_enroll_persists(svc, store):
    e = svc.enroll(7, 1, TERM, "2026-01-20")

    assert e == Enrollment(student_id=7, group_id=1, term=TERM, enrolled_on=date(2026, 1, 20))
    assert store.get_active_enrollments(7) == [e]


def test_conflicting_group_is_rejected_with_details(svc, store):
    svc.enroll(7, 1, TERM, date(2026, 1, 20))

    with pytest.raises(ScheduleConflictError) as err:
        svc.enroll(7, 2, TERM, date(2026, 1, 21))

    assert len(err.value.conflicts) == 1
    assert err.value.conflicts[0].existing_group_id == 1
    assert "MONDAY 08:00-10:00" in str(err.value)
    assert len(store.get_active_enrollments(7)) == 1


def test_touching_group_is_accepted(svc, store):
    svc.enroll(7, 1, TERM, date(2026, 1, 20))
    svc.enroll(7, 3, TERM, date(2026, 1, 20))

    assert {e.group_id for e in store.get_active_enrollments(7)} == {1, 3}


def test_duplicate_enrollment_rejected(svc):
    svc.enroll(7, 1, TERM, date(2026, 1, 20))
    with pytest.raises(ValidationError):
        svc.enroll(7, 1, TERM, date(2026, 1, 22))


def test_term_must_match_group(svc):
    with pytest.raises(ValidationError):
        svc.enroll(7, 1, Term(2, 2026), date(2026, 8, 1))


@pytest.mark.parametrize(
    "student_id, group_id, term, on",
    [
        (0, 1, TERM, "2026-01-20"),
        (7, 99, TERM, "2026-01-20"),
        (7, 1, "1/2026", "2026-01-20"),
        (7, 1, TERM, "20-01-2026"),
    ],
)
def test_invalid_requests(svc, student_id, group_id, term, on):
    with pytest.raises(ValidationError):
        svc.enroll(student_id, group_id, term, on)


def test_term_validation():
    with pytest.raises(ValidationError):
        Term(semester=3, year=2026)
    assert str(Term(2, 2025)) == "2/2025"
