"""
Request and response bodies for /auth.
"""
from typing import Optional

from pydantic import EmailStr, Field

from aspiro.schemas.base import BaseSchema

MIN_PASSWORD_LENGTH = 8


class Credentials(BaseSchema):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class RegisterRequest(Credentials):
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH, max_length=128)
    full_name: Optional[str] = Field(None, max_length=255)


class RefreshTokenRequest(BaseSchema):
    refresh_token: str = Field(..., min_length=1)


class TokenResponse(BaseSchema):
    """Bearer token pair; `expires_in` is the access token lifetime in seconds."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int
