"""Tag schemas."""

from .base import BaseModelSchema


class TagResponse(BaseModelSchema):
    """Schema for a resolved tag entity."""

    name: str
