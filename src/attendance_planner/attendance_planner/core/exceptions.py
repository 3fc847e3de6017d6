class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "ValidationError"


class NotFoundError(DomainError):
    """Raised when a stored record does not exist."""


class ProjectionError(ValidationError):
    """Attendance input rejected before any projection is computed."""

    default_message = "Invalid attendance input"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class ZeroTotalError(ProjectionError):
    code = "ZeroTotal"
    default_message = "Total sessions cannot be 0 or empty"


class MissingAttendedError(ProjectionError):
    code = "MissingAttended"
    default_message = "Please enter attended sessions"


class AttendedExceedsTotalError(ProjectionError):
    code = "AttendedExceedsTotal"
    default_message = "Attended sessions cannot be more than total sessions"


class TargetOutOfRangeError(ProjectionError):
    code = "TargetOutOfRange"
    default_message = "Target attendance must be above 0 and at most 100"


class TargetUnreachableError(ProjectionError):
    """A 100% target cannot be reached once a single session was missed."""

    code = "TargetUnreachable"
    default_message = "Target attendance of 100% can no longer be reached"
