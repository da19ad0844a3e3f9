class CoachingError(Exception):
    """Base class for errors raised by the coaching engine."""

    status_code = 400
    code = "error"


class ValidationError(CoachingError):
    """User input is missing or out of range. The action is blocked."""

    code = "validation_error"


class InvalidProgramError(CoachingError):
    """The program handed to a session has no usable exercise list."""

    status_code = 422
    code = "invalid_program"


class NotFoundError(CoachingError):
    status_code = 404
    code = "not_found"


class StorageError(CoachingError):
    """Stored data exists but could not be read."""

    status_code = 503
    code = "storage_unavailable"
