"""
Request identity for the routes.

`get_current_user` guards endpoints that need a signed-in caller;
`get_optional_user` serves endpoints that only personalise for one.
"""
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.core.database import get_db
from aspiro.core.exceptions import InvalidTokenException, UnauthorizedException
from aspiro.core.logging import bind_user
from aspiro.core.security import ACCESS, read_subject
from aspiro.models.user import User
from aspiro.repositories.user_repository import UserRepository

bearer = HTTPBearer(auto_error=False)

user_repo = UserRepository()


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Resolve the bearer access token to an active user.

    The user is left on request.state for the rate limiter's key function.

    Raises:
        UnauthorizedException: No Authorization header.
        InvalidTokenException: Bad, expired or refresh token, or the user is
            gone or deactivated.
    """
    if credentials is None:
        raise UnauthorizedException("Authentication required")

    user_id = read_subject(credentials.credentials, ACCESS)
    user = await user_repo.get_active_by_id(db, user_id) if user_id else None
    if user is None:
        raise InvalidTokenException()

    request.state.current_user = user
    bind_user(str(user.id))
    return user


async def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: AsyncSession = Depends(get_db),
) -> Optional[User]:
    """Like get_current_user, but an absent or unusable token means anonymous."""
    if credentials is None:
        return None
    try:
        return await get_current_user(request, credentials, db)
    except UnauthorizedException:
        return None
