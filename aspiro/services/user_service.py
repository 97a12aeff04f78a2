"""
User service - business logic for the profile, recorded skills and
trend subscriptions.

Routes never touch the database directly - they call methods here.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.core.exceptions import SkillNotFoundException
from aspiro.core.logging import get_logger
from aspiro.engine.proficiency import ProficiencyLevel
from aspiro.models.skill import Skill
from aspiro.models.user import User
from aspiro.models.user_skill import UserSkill
from aspiro.repositories.catalog_repository import SkillRepository
from aspiro.repositories.insight_repository import UserSubscriptionRepository
from aspiro.repositories.user_repository import UserRepository
from aspiro.schemas.trends import SubscriptionResponse
from aspiro.schemas.user import (
    UserProfileResponse,
    UserResponse,
    UserSkillResponse,
)

logger = get_logger(__name__)


class UserService:
    """Handles user profile operations."""

    def __init__(self):
        self.user_repo = UserRepository()
        self.skill_repo = SkillRepository()
        self.subscription_repo = UserSubscriptionRepository()

    async def get_profile(
        self,
        db: AsyncSession,
        user: User,
    ) -> UserProfileResponse:
        """Get the user profile with the number of recorded skills."""
        skills_count = await self.user_repo.count_skills(db, user.id)

        return UserProfileResponse(
            **self._to_response(user).model_dump(),
            skills_count=skills_count,
        )

    async def update_profile(
        self,
        db: AsyncSession,
        user: User,
        *,
        full_name: Optional[str] = None,
        experience_level: Optional[str] = None,
    ) -> UserResponse:
        """Update user profile fields."""
        updates = {}
        if full_name is not None:
            updates["full_name"] = full_name
        if experience_level is not None:
            updates["experience_level"] = experience_level

        if updates:
            user = await self.user_repo.update(db, user, **updates)
            await db.commit()

        return self._to_response(user)

    # ── Skills ────────────────────────────────────────────────────────────

    async def list_skills(
        self,
        db: AsyncSession,
        user: User,
    ) -> List[UserSkillResponse]:
        rows = await self.user_repo.get_user_skills(db, user.id)
        return [self._to_skill_response(row, row.skill) for row in rows]

    async def upsert_skill(
        self,
        db: AsyncSession,
        user: User,
        *,
        skill_id: UUID,
        proficiency_level: ProficiencyLevel,
        years_experience: Optional[float] = None,
    ) -> UserSkillResponse:
        """
        Record a skill, or update it if the user already has it.

        Raises:
            SkillNotFoundException: If the skill is not in the catalog.
        """
        skill = await self.skill_repo.get_by_id(db, skill_id)
        if not skill:
            raise SkillNotFoundException()

        row = await self.user_repo.upsert_user_skill(
            db,
            user.id,
            skill_id,
            proficiency_level=proficiency_level.value,
            years_experience=years_experience,
        )
        await db.commit()

        logger.info(
            "user_skill_recorded",
            user_id=str(user.id),
            skill=skill.name,
            level=proficiency_level.value,
        )
        return self._to_skill_response(row, skill)

    async def remove_skill(
        self,
        db: AsyncSession,
        user: User,
        skill_id: UUID,
    ) -> None:
        """
        Raises:
            SkillNotFoundException: If the user has not recorded this skill.
        """
        removed = await self.user_repo.remove_user_skill(db, user.id, skill_id)
        if not removed:
            raise SkillNotFoundException()
        await db.commit()

    # ── Subscriptions ─────────────────────────────────────────────────────

    async def list_subscriptions(
        self,
        db: AsyncSession,
        user: User,
    ) -> List[SubscriptionResponse]:
        rows = await self.subscription_repo.list_active(db, user.id)
        return [SubscriptionResponse.model_validate(row) for row in rows]

    async def subscribe(
        self,
        db: AsyncSession,
        user: User,
        *,
        subscription_type: str,
        target: str,
    ) -> SubscriptionResponse:
        row = await self.subscription_repo.subscribe(
            db,
            user_id=user.id,
            subscription_type=subscription_type,
            target=target,
        )
        await db.commit()
        return SubscriptionResponse.model_validate(row)

    def _to_response(self, user: User) -> UserResponse:
        return UserResponse(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            experience_level=user.experience_level,
            is_active=user.is_active,
            last_seen_at=user.last_seen_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _to_skill_response(self, row: UserSkill, skill: Skill) -> UserSkillResponse:
        return UserSkillResponse(
            skill_id=row.skill_id,
            skill_name=skill.name,
            skill_category=skill.category,
            proficiency_level=ProficiencyLevel.parse(row.proficiency_level) or ProficiencyLevel.BEGINNER,
            years_experience=row.years_experience,
            updated_at=row.updated_at,
        )
