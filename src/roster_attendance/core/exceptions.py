class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConfigurationError(DomainError):
    """Raised when a group schedule or policy is misconfigured."""


class ScheduleConflictError(DomainError):
    """Raised when an enrollment would collide with the student's timetable."""

    def __init__(self, message: str, conflicts=()):
        super().__init__(message)
        self.conflicts = tuple(conflicts)


class StoreError(Exception):
    """Raised by store implementations when persistence fails."""


class DuplicateRecordError(StoreError):
    """Raised when the store rejects a row that violates a unique key."""
