"""File attachment schemas for request/response serialization."""

from __future__ import annotations

from uuid import UUID

from pydantic import AliasChoices, Field, computed_field

from app.core.config import settings

from .base import BaseModelSchema, BaseSchema, UTCDatetime


def public_url(stored_name: str) -> str:
    """Public retrieval path for a stored upload."""
    return f"{settings.upload_url}/{stored_name}"


class FileUpload(BaseSchema):
    """Schema for attaching a file to a todo.

    ``file`` is a data URL (``data:<mimetype>;base64,<payload>``).
    """

    # parsed by the controller; an unparseable id is an unknown todo
    todo_id: str = Field(..., min_length=1, validation_alias=AliasChoices("todoId", "todo_id"))
    file: str = Field(..., min_length=1)
    filename: str = Field(..., min_length=1, max_length=255)
    mimetype: str | None = Field(None, max_length=255)


class TodoFileResponse(BaseModelSchema):
    """Schema for an attachment embedded in a todo."""

    todo_id: UUID
    filename: str
    mimetype: str
    size: int
    stored_name: str = Field(exclude=True)

    @computed_field
    @property
    def url(self) -> str:
        return public_url(self.stored_name)


class FileUploadResponse(BaseSchema):
    """Schema returned after a successful upload."""

    id: UUID
    filename: str
    url: str
    size: int
    mimetype: str
    created_at: UTCDatetime
