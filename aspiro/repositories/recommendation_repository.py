"""
Result caches - latest career recommendation and skill gap analysis per
(user, career).

Both caches are written by upsert; only the recommendation cache is read
back, by the feedback endpoint. Scoring always starts from live skill rows.
"""
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.models.career_recommendation import CareerRecommendation
from aspiro.models.skill_gap_analysis import SkillGapAnalysis
from aspiro.repositories.base import BaseRepository


class CareerRecommendationRepository(BaseRepository[CareerRecommendation]):
    def __init__(self):
        super().__init__(CareerRecommendation)

    async def get_for_career(
        self,
        db: AsyncSession,
        user_id: UUID,
        career_id: UUID,
    ) -> Optional[CareerRecommendation]:
        result = await db.execute(
            select(CareerRecommendation).where(
                CareerRecommendation.user_id == user_id,
                CareerRecommendation.career_id == career_id,
            )
        )
        return result.scalar_one_or_none()

    async def store(
        self,
        db: AsyncSession,
        *,
        user_id: UUID,
        career_id: UUID,
        match_score: float,
        explanation: str,
        factors: Dict[str, Any],
    ) -> CareerRecommendation:
        """Overwrite the cached result; a new run clears earlier feedback."""
        return await self.upsert(
            db,
            {"user_id": user_id, "career_id": career_id},
            match_score=match_score,
            explanation=explanation,
            recommendation_factors=factors,
            is_current=True,
            user_feedback=None,
        )


class SkillGapAnalysisRepository(BaseRepository[SkillGapAnalysis]):
    def __init__(self):
        super().__init__(SkillGapAnalysis)

    async def store(
        self,
        db: AsyncSession,
        *,
        user_id: UUID,
        career_id: UUID,
        skill_gaps: List[Dict[str, Any]],
        recommended_resources: List[Dict[str, Any]],
    ) -> SkillGapAnalysis:
        return await self.upsert(
            db,
            {"user_id": user_id, "career_id": career_id},
            skill_gaps=skill_gaps,
            recommended_resources=recommended_resources,
            is_current=True,
        )
