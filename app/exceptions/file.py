"""File attachment exceptions."""

from .base import AppPermissionError, NotFoundError, ValidationError


class TodoFileNotFoundError(NotFoundError):
    """No attachment has the requested ID."""

    def __init__(self, message: str = "File not found"):
        super().__init__(message, error_code="FILE_NOT_FOUND")


class InvalidFileError(ValidationError):
    """The upload is not a well-formed data URL or is too large."""

    def __init__(self, message: str = "Invalid file data"):
        super().__init__(message, error_code="INVALID_FILE")


class FilePathNotAllowedError(AppPermissionError):
    """A stored path resolves outside the managed upload directory."""

    def __init__(self, message: str = "File path is outside the upload directory"):
        super().__init__(message, error_code="FILE_PATH_NOT_ALLOWED")
