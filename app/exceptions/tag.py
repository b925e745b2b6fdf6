"""Tag-related exceptions."""

from .base import NotFoundError, ValidationError


class TagNotFoundError(NotFoundError):
    def __init__(self, message: str = "Tag not found"):
        super().__init__(message, error_code="TAG_NOT_FOUND")


class TagValidationError(ValidationError):
    def __init__(self, message: str = "Invalid tag name"):
        super().__init__(message, error_code="TAG_VALIDATION_ERROR")
