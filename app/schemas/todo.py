"""Todo schemas for request/response serialization."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StringConstraints, field_validator, model_validator

from models.tag import TAG_NAME_MAX_LENGTH

from .base import BaseModelSchema, BaseSchema
from .file import TodoFileResponse
from .tag import TagResponse

# Titles are trimmed and length-checked by the service, tags here as well
TagName = Annotated[str, StringConstraints(strip_whitespace=True, max_length=TAG_NAME_MAX_LENGTH)]


class TodoCreate(BaseSchema):
    """Schema for creating a new todo."""

    title: str
    description: str | None = None
    tags: list[TagName] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def null_tags_mean_empty(cls, v):
        return [] if v is None else v


class TodoUpdate(BaseSchema):
    """Schema for updating a todo.

    Every field is optional and independent. Fields left out of the request
    body stay unset (see ``model_fields_set``) and leave the column untouched;
    ``description`` may be sent as ``null`` to clear it.
    """

    title: str | None = None
    description: str | None = None
    completed: bool | None = None
    tags: list[TagName] | None = None

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        for field in ("title", "completed", "tags"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class TodoResponse(BaseModelSchema):
    """Schema for todo response."""

    title: str
    description: str | None = None
    completed: bool
    files: list[TodoFileResponse] = []
    tags: list[TagResponse] = []


class TodoFilter(BaseSchema):
    """Schema for filtering todos."""

    tag: str | None = None
