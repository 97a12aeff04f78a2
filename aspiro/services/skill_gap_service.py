"""
Skill gap service - compares the user's skills with one career and attaches
learning resources to every gap.
"""
from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.core.config import settings
from aspiro.core.exceptions import CareerNotFoundException
from aspiro.core.logging import get_logger
from aspiro.engine.skill_gap import (
    attach_learning_resources,
    detect_skill_gaps,
    summarize_skill_gaps,
)
from aspiro.engine.types import index_holdings
from aspiro.models.learning_resource import LearningResource
from aspiro.models.user import User
from aspiro.repositories.catalog_repository import CareerRepository, LearningResourceRepository
from aspiro.repositories.recommendation_repository import SkillGapAnalysisRepository
from aspiro.repositories.user_repository import UserRepository
from aspiro.schemas.skill_gap import (
    CareerBrief,
    LearningResourceResponse,
    SkillGap,
    SkillGapAnalysisResponse,
)
from aspiro.services.catalog_service import parse_career_id, to_career_profile, to_held_skills

logger = get_logger(__name__)


def to_resource_response(resource: LearningResource) -> LearningResourceResponse:
    return LearningResourceResponse(
        id=resource.id,
        title=resource.title,
        description=resource.description,
        type=resource.resource_type,
        url=resource.url,
        provider=resource.provider,
        duration_hours=resource.duration_hours,
        difficulty_level=resource.difficulty_level,
        rating=resource.rating,
        price_usd=resource.price_usd,
    )


class SkillGapService:
    """Handles skill gap analysis against a target career."""

    def __init__(self):
        self.user_repo = UserRepository()
        self.career_repo = CareerRepository()
        self.resource_repo = LearningResourceRepository()
        self.analysis_repo = SkillGapAnalysisRepository()

    async def analyze(
        self,
        db: AsyncSession,
        user: User,
        target_career_id: str,
    ) -> SkillGapAnalysisResponse:
        """
        Gap analysis for one career, Critical gaps first.

        Raises:
            CareerNotFoundException: If the career id is malformed or unknown.
        """
        career_id = parse_career_id(target_career_id)
        career = await self.career_repo.get_with_requirements(db, career_id)
        if not career:
            raise CareerNotFoundException()

        profile = to_career_profile(career)
        user_skills = await self.user_repo.get_user_skills(db, user.id)
        held = index_holdings(to_held_skills(user_skills))

        gaps = detect_skill_gaps(held, profile.requirements)

        resources = await self.resource_repo.top_rated_for_skills(
            db,
            [gap.skill_id for gap in gaps],
            per_skill=settings.resources_per_gap,
        )
        gaps = attach_learning_resources(
            gaps,
            {
                skill_id: [to_resource_response(r) for r in rows]
                for skill_id, rows in resources.items()
            },
            limit=settings.resources_per_gap,
        )
        summary = summarize_skill_gaps(len(profile.requirements), gaps)

        await self.analysis_repo.store(
            db,
            user_id=user.id,
            career_id=career.id,
            skill_gaps=[
                gap.model_dump(mode="json", exclude={"learning_resources"}) for gap in gaps
            ],
            recommended_resources=self._cached_resources(gaps),
        )
        await db.commit()

        logger.info(
            "skill_gap_analyzed",
            user_id=str(user.id),
            career=career.name,
            gaps=len(gaps),
            critical=summary.critical_gaps,
        )

        return SkillGapAnalysisResponse(
            career=CareerBrief(id=career.id, name=career.name, description=career.description),
            skill_gaps=gaps,
            summary=summary,
        )

    def _cached_resources(self, gaps: List[SkillGap]) -> List[Dict]:
        per_gap = settings.cached_resources_per_gap
        return [
            {
                "skill_id": str(gap.skill_id),
                "resources": [
                    r.model_dump(mode="json") for r in gap.learning_resources[:per_gap]
                ],
            }
            for gap in gaps
        ]
