"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes, used for logging."""

    # Client errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    TODO_NOT_FOUND = "TODO_NOT_FOUND"

    # Persistence errors
    STORE_ERROR = "STORE_ERROR"
    DATABASE_UNAVAILABLE = "DATABASE_UNAVAILABLE"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception.

    Every request-time failure is answered with a 400 and a plain-text body;
    ``status_code`` stays configurable per exception.
    """

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Request payload could not be parsed into valid input."""

    def __init__(self, message: str = "invalid payload", details: Any | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            details=details,
        )


class TodoNotFoundError(AppException):
    """Todo not found."""

    def __init__(self, todo_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.TODO_NOT_FOUND,
            message="not found",
            details={"todo_id": todo_id},
        )


class StoreError(AppException):
    """Underlying persistence failure (connectivity, constraint, query)."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.STORE_ERROR,
            message=message,
            details={"operation": operation} if operation else None,
        )


class DatabaseConnectionError(ConnectionError):
    """Database unreachable or schema bootstrap failed at startup.

    Not an ``AppException``: it is never turned into a response, the process
    stops instead.
    """

    error_code = ErrorCode.DATABASE_UNAVAILABLE
