"""
Catalog repositories - skills, careers and learning resources.

All three tables are reference data: request handlers only read them.
"""
from collections import defaultdict
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from aspiro.models.career import Career, CareerSkill
from aspiro.models.learning_resource import LearningResource
from aspiro.models.skill import Skill
from aspiro.repositories.base import BaseRepository


class SkillRepository(BaseRepository[Skill]):
    def __init__(self):
        super().__init__(Skill)

    async def list_skills(
        self,
        db: AsyncSession,
        *,
        category: Optional[str] = None,
    ) -> List[Skill]:
        """All catalog skills, alphabetical, optionally one category only."""
        query = select(Skill)
        if category:
            query = query.where(Skill.category == category)
        result = await db.execute(query.order_by(Skill.name))
        return list(result.scalars().all())


class CareerRepository(BaseRepository[Career]):
    def __init__(self):
        super().__init__(Career)

    def _with_requirements(self):
        return select(Career).options(
            selectinload(Career.requirements).selectinload(CareerSkill.skill)
        )

    async def list_with_requirements(self, db: AsyncSession) -> List[Career]:
        """Every career with requirements and their skills eagerly loaded."""
        result = await db.execute(self._with_requirements().order_by(Career.name))
        return list(result.scalars().all())

    async def get_with_requirements(
        self,
        db: AsyncSession,
        career_id: UUID,
    ) -> Optional[Career]:
        result = await db.execute(
            self._with_requirements().where(Career.id == career_id)
        )
        return result.scalar_one_or_none()


class LearningResourceRepository(BaseRepository[LearningResource]):
    def __init__(self):
        super().__init__(LearningResource)

    async def top_rated_for_skills(
        self,
        db: AsyncSession,
        skill_ids: Sequence[UUID],
        *,
        per_skill: int,
    ) -> Dict[UUID, List[LearningResource]]:
        """
        Up to `per_skill` resources for each skill, highest rating first.

        Unrated resources sort last; equal ratings fall back to title.
        """
        if not skill_ids:
            return {}

        result = await db.execute(
            select(LearningResource)
            .where(LearningResource.skill_id.in_(list(skill_ids)))
            .order_by(
                LearningResource.rating.desc().nulls_last(),
                LearningResource.title,
            )
        )

        grouped: Dict[UUID, List[LearningResource]] = defaultdict(list)
        for resource in result.scalars().all():
            bucket = grouped[resource.skill_id]
            if len(bucket) < per_skill:
                bucket.append(resource)
        return dict(grouped)
