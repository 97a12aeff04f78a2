"""
User repository - data access for User and UserSkill entities.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from aspiro.models.user import User
from aspiro.models.user_skill import UserSkill
from aspiro.repositories.base import BaseRepository, upsert_row


class UserRepository(BaseRepository[User]):
    def __init__(self):
        super().__init__(User)

    async def get_active_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        return await self.find_one(db, email=email, is_active=True)

    async def get_active_by_id(self, db: AsyncSession, user_id: UUID) -> Optional[User]:
        return await self.find_one(db, id=user_id, is_active=True)

    async def email_exists(self, db: AsyncSession, email: str) -> bool:
        """Any account, active or not, holds the address."""
        result = await db.execute(select(User.id).where(User.email == email))
        return result.first() is not None

    # ── Skills ────────────────────────────────────────────────────────────

    async def get_user_skills(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> List[UserSkill]:
        """Get all skills for a user with the catalog entry loaded."""
        result = await db.execute(
            select(UserSkill)
            .options(selectinload(UserSkill.skill))
            .where(UserSkill.user_id == user_id)
            .order_by(UserSkill.created_at)
        )
        return list(result.scalars().all())

    async def get_user_skill(
        self,
        db: AsyncSession,
        user_id: UUID,
        skill_id: UUID,
    ) -> Optional[UserSkill]:
        result = await db.execute(
            select(UserSkill)
            .options(selectinload(UserSkill.skill))
            .where(UserSkill.user_id == user_id, UserSkill.skill_id == skill_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_user_skill_names(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> List[str]:
        skills = await self.get_user_skills(db, user_id)
        return [s.skill.name for s in skills]

    async def count_skills(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> int:
        """Count skills for a user."""
        result = await db.execute(
            select(func.count(UserSkill.id)).where(UserSkill.user_id == user_id)
        )
        return result.scalar() or 0

    async def remove_user_skill(
        self,
        db: AsyncSession,
        user_id: UUID,
        skill_id: UUID,
    ) -> bool:
        result = await db.execute(
            delete(UserSkill).where(
                UserSkill.user_id == user_id,
                UserSkill.skill_id == skill_id,
            )
        )
        return result.rowcount > 0

    async def upsert_user_skill(
        self,
        db: AsyncSession,
        user_id: UUID,
        skill_id: UUID,
        *,
        proficiency_level: str,
        years_experience: Optional[float] = None,
    ) -> UserSkill:
        """One row per (user, skill): recording a skill again overwrites it."""
        await upsert_row(
            db,
            UserSkill,
            {"user_id": user_id, "skill_id": skill_id},
            proficiency_level=proficiency_level,
            years_experience=years_experience,
        )
        return await self.get_user_skill(db, user_id, skill_id)
