"""Base schemas for the application."""

from datetime import datetime, timezone
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops the offset) and convert the rest."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDatetime = Annotated[datetime, AfterValidator(as_utc)]


class BaseSchema(BaseModel):
    """Base schema class with common configuration.

    Fields are read by their snake_case names (also from ORM attributes) and
    serialized with camelCase keys.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
        populate_by_name=True,
    )


class BaseModelSchema(BaseSchema):
    """Base schema for database models."""

    id: UUID
    created_at: UTCDatetime
    updated_at: UTCDatetime


class SuccessResponse(BaseSchema):
    """Acknowledgement returned by delete endpoints."""

    success: bool = True


class ErrorResponse(BaseSchema):
    """Body of every non-2xx response."""

    error: str
