"""
Shared pydantic building blocks.
"""
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Reads ORM objects directly (`model_validate(row)`)."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class IDSchema(BaseSchema):
    id: UUID


class TimestampSchema(BaseSchema):
    created_at: datetime
    updated_at: datetime


def require_text(value: str, field_name: str) -> str:
    """Strip a required text field and reject blank values."""
    stripped = value.strip()
    if not stripped:
        raise ValueError(f"{field_name} must not be blank")
    return stripped
