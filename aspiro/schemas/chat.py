"""
Career chat schemas.
"""
from typing import Optional

from pydantic import Field, field_validator

from aspiro.schemas.base import BaseSchema, require_text


class ChatRequest(BaseSchema):
    message: str = Field(..., max_length=4000)
    context: Optional[str] = Field(None, max_length=4000)

    @field_validator("message")
    @classmethod
    def message_required(cls, v: str) -> str:
        return require_text(v, "message")


class ChatResponse(BaseSchema):
    reply: str
