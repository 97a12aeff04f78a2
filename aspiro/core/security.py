"""
Password hashing and bearer tokens.

Tokens are HS256 JWTs whose `sub` is the user's UUID and whose `type` claim
separates short-lived access tokens from refresh tokens, so one can never be
used in place of the other.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext

from aspiro.core.config import settings

ACCESS = "access"
REFRESH = "refresh"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def _encode(user_id: UUID, token_type: str, lifetime: timedelta) -> str:
    claims = {
        "sub": str(user_id),
        "type": token_type,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def create_access_token(user_id: UUID, expires_delta: Optional[timedelta] = None) -> str:
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    return _encode(user_id, ACCESS, lifetime)


def create_refresh_token(user_id: UUID) -> str:
    return _encode(user_id, REFRESH, timedelta(days=settings.refresh_token_expire_days))


def issue_token_pair(user_id: UUID) -> Tuple[str, str]:
    """(access_token, refresh_token) for one user."""
    return create_access_token(user_id), create_refresh_token(user_id)


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """Verified claims, or None if the signature is bad or the token expired."""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None


def read_subject(token: str, expected_type: str) -> Optional[UUID]:
    """
    The user id a token was issued for.

    Returns None for an invalid or expired token, a token of the other type,
    or a `sub` that is not a UUID.
    """
    claims = decode_token(token)
    if not claims or claims.get("type") != expected_type:
        return None
    try:
        return UUID(str(claims.get("sub")))
    except ValueError:
        return None
