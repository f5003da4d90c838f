from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Term:
    """Academic period: semester (1 or 2) of a given year."""

    semester: int
    year: int

    def __post_init__(self) -> None:
        if self.semester not in (1, 2):
            raise ValidationError(f"Semester must be 1 or 2, got {self.semester!r}")
        if isinstance(self.year, bool) or not isinstance(self.year, int) or self.year <= 0:
            raise ValidationError(f"Year is not valid: {self.year!r}")

    def __str__(self) -> str:
        return f"{self.semester}/{self.year}"


@dataclass(frozen=True)
class Enrollment:
    """A student's registration in a group for one term. Never mutated."""

    student_id: int
    group_id: int
    term: Term
    enrolled_on: date
