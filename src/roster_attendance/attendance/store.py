from __future__ import annotations

from typing import Protocol

from ..enrollments.repository import EnrollmentRepository
from ..groups.repository import GroupRepository
from .repository import AttendanceRepository


class AttendanceStore(EnrollmentRepository, GroupRepository, AttendanceRepository, Protocol):
    """Everything the engine reads and writes, as one collaborator."""
