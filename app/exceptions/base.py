# ruff: noqa: D107
"""Base exception classes.

Every error the API reports is one of four categories. Domain exceptions
subclass a category and only add their own message and ``error_code``.
"""

from typing import Any

from fastapi import HTTPException


class BaseAppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(
            status_code=status_code,
            detail={"message": message, "error_code": error_code, "details": details},
        )


class NotFoundError(BaseAppException):
    """A referenced todo, file or tag does not exist."""

    def __init__(
        self,
        message: str = "Resource not found",
        error_code: str = "NOT_FOUND",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, status_code=404, error_code=error_code, details=details)


class AppPermissionError(BaseAppException):
    """The operation would touch something the application does not manage."""

    def __init__(
        self,
        message: str = "Permission denied",
        error_code: str = "PERMISSION_DENIED",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, status_code=403, error_code=error_code, details=details)


class ValidationError(BaseAppException):
    """Input is missing or malformed."""

    def __init__(
        self,
        message: str = "Validation failed",
        error_code: str = "VALIDATION_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, status_code=400, error_code=error_code, details=details)


class StorageError(BaseAppException):
    """The database or file store failed unexpectedly.

    The message is shown to clients, so callers pass a fixed description and
    keep the underlying error for the logs.
    """

    def __init__(
        self,
        message: str = "Storage operation failed",
        error_code: str = "STORAGE_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, status_code=500, error_code=error_code, details=details)
