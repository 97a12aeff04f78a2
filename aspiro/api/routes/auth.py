"""
Authentication routes.

Thin controllers - all business logic lives in AuthService.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.core.database import get_db
from aspiro.core.rate_limit import RATE_AUTH, limiter
from aspiro.schemas.auth import (
    Credentials,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
)
from aspiro.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

auth_service = AuthService()


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_AUTH)
async def register(
    request: Request,
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new user.

    Returns access and refresh tokens on successful registration.
    """
    return await auth_service.register(
        db,
        email=body.email,
        password=body.password,
        full_name=body.full_name,
    )


@router.post("/login", response_model=TokenResponse)
@limiter.limit(RATE_AUTH)
async def login(
    request: Request,
    body: Credentials,
    db: AsyncSession = Depends(get_db),
):
    """Login with email and password."""
    return await auth_service.login(db, email=body.email, password=body.password)


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token(
    body: RefreshTokenRequest,
    db: AsyncSession = Depends(get_db),
):
    """Refresh access token using refresh token."""
    return await auth_service.refresh(db, refresh_token=body.refresh_token)
