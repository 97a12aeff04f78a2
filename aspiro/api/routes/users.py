"""
User routes: profile, recorded skills and trend subscriptions.

Thin controllers - all business logic lives in UserService.
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.api.deps import get_current_user
from aspiro.core.database import get_db
from aspiro.models.user import User
from aspiro.schemas.trends import SubscriptionCreate, SubscriptionResponse
from aspiro.schemas.user import (
    UserProfileResponse,
    UserResponse,
    UserSkillResponse,
    UserSkillUpsert,
    UserUpdate,
)
from aspiro.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

user_service = UserService()


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get current user's profile with skill count."""
    return await user_service.get_profile(db, current_user)


@router.patch("/me", response_model=UserResponse)
async def update_current_user(
    body: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update current user's profile."""
    return await user_service.update_profile(
        db,
        current_user,
        full_name=body.full_name,
        experience_level=body.experience_level,
    )


# ── Skills ────────────────────────────────────────────────────────────────


@router.get("/me/skills", response_model=List[UserSkillResponse])
async def list_my_skills(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await user_service.list_skills(db, current_user)


@router.put("/me/skills", response_model=UserSkillResponse)
async def upsert_my_skill(
    body: UserSkillUpsert,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Record a skill, or change the level of one already recorded."""
    return await user_service.upsert_skill(
        db,
        current_user,
        skill_id=body.skill_id,
        proficiency_level=body.proficiency_level,
        years_experience=body.years_experience,
    )


@router.delete("/me/skills/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_my_skill(
    skill_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await user_service.remove_skill(db, current_user, skill_id)


# ── Subscriptions ─────────────────────────────────────────────────────────


@router.get("/me/subscriptions", response_model=List[SubscriptionResponse])
async def list_my_subscriptions(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await user_service.list_subscriptions(db, current_user)


@router.post(
    "/me/subscriptions",
    response_model=SubscriptionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def subscribe(
    body: SubscriptionCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Follow an industry or a skill in the trends feed."""
    return await user_service.subscribe(
        db,
        current_user,
        subscription_type=body.subscription_type,
        target=body.target,
    )
