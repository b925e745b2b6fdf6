"""Todo-related exceptions."""

from .base import NotFoundError, ValidationError


class TodoNotFoundError(NotFoundError):
    def __init__(self, message: str = "Todo not found"):
        super().__init__(message, error_code="TODO_NOT_FOUND")


class TodoValidationError(ValidationError):
    def __init__(self, message: str = "Todo validation failed"):
        super().__init__(message, error_code="TODO_VALIDATION_ERROR")
