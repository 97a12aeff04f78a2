"""
Auth service - account registration, password login and token refresh.

Emails are stored lowercased, so lookups are case-insensitive.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.core.config import settings
from aspiro.core.exceptions import (
    EmailAlreadyExistsException,
    InvalidCredentialsException,
    InvalidTokenException,
)
from aspiro.core.logging import get_logger
from aspiro.core.security import (
    REFRESH,
    hash_password,
    issue_token_pair,
    read_subject,
    verify_password,
)
from aspiro.models.user import User
from aspiro.repositories.user_repository import UserRepository
from aspiro.schemas.auth import TokenResponse

logger = get_logger(__name__)


def token_response(user: User) -> TokenResponse:
    access_token, refresh_token = issue_token_pair(user.id)
    return TokenResponse(
        access_token=access_token,
        refresh_token=refresh_token,
        expires_in=settings.access_token_expire_minutes * 60,
    )


class AuthService:
    def __init__(self):
        self.user_repo = UserRepository()

    async def register(
        self,
        db: AsyncSession,
        *,
        email: str,
        password: str,
        full_name: Optional[str] = None,
    ) -> TokenResponse:
        """
        Create an account and sign it in.

        Raises:
            EmailAlreadyExistsException: If the email is taken, in any letter case.
        """
        email = email.lower()
        if await self.user_repo.email_exists(db, email):
            raise EmailAlreadyExistsException()

        user = await self.user_repo.create(
            db,
            email=email,
            password_hash=hash_password(password),
            full_name=full_name,
        )
        await db.commit()

        logger.info("user_registered", user_id=str(user.id))
        return token_response(user)

    async def login(
        self,
        db: AsyncSession,
        *,
        email: str,
        password: str,
    ) -> TokenResponse:
        """
        Raises:
            InvalidCredentialsException: Unknown or inactive account, or wrong
                password. The two cases are indistinguishable to the caller.
        """
        user = await self.user_repo.get_active_by_email(db, email.lower())
        if user is None or not verify_password(password, user.password_hash):
            logger.info("login_rejected")
            raise InvalidCredentialsException()

        user.last_seen_at = datetime.now(timezone.utc)
        await db.commit()
        return token_response(user)

    async def refresh(
        self,
        db: AsyncSession,
        *,
        refresh_token: str,
    ) -> TokenResponse:
        """
        Exchange a refresh token for a new pair.

        Raises:
            InvalidTokenException: If the token is not a live refresh token
                for an active user.
        """
        user_id = read_subject(refresh_token, REFRESH)
        user = await self.user_repo.get_active_by_id(db, user_id) if user_id else None
        if user is None:
            raise InvalidTokenException()
        return token_response(user)
