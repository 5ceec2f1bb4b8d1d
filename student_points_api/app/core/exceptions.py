"""
Error types raised by the roster service.

Every error carries the HTTP status code and the human readable
message that the exception handlers in ``app.main`` put into the
``{"success": false, "message": ...}`` response body.  Request shape
problems are not represented here: FastAPI raises
``RequestValidationError`` for them before a handler runs.
"""


class RosterError(Exception):
    """Base class for all roster errors."""

    status_code: int = 500
    message: str = "Server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFoundError(RosterError):
    status_code = 404
    message = "Not found"


class StudentNotFoundError(NotFoundError):
    message = "Student not found"

    def __init__(self, student_id: str) -> None:
        self.student_id = student_id
        super().__init__()


class BusinessRuleError(RosterError):
    status_code = 400
    message = "Request violates a business rule"


class AlreadyFilledTodayError(BusinessRuleError):
    message = "The form has already been filled today"


class ConflictError(RosterError):
    status_code = 400
    message = "Conflict"


class DuplicateStudentError(ConflictError):
    message = "Student already exists"

    def __init__(self, student_id: str) -> None:
        self.student_id = student_id
        super().__init__()


class StorageError(RosterError):
    """Reading or writing the roster document failed."""

    status_code = 500
    message = "Server error"
