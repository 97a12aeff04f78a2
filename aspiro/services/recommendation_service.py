"""
Career recommendation service - ranks every career for a user and keeps the
latest result per career in the recommendation cache.
"""
from typing import Any, Dict
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.core.config import settings
from aspiro.core.exceptions import RecommendationNotFoundException
from aspiro.core.logging import get_logger
from aspiro.engine.career_match import rank_careers
from aspiro.engine.types import index_holdings
from aspiro.models.user import User
from aspiro.repositories.catalog_repository import CareerRepository
from aspiro.repositories.recommendation_repository import CareerRecommendationRepository
from aspiro.repositories.user_repository import UserRepository
from aspiro.schemas.career import (
    CareerFeedbackResponse,
    MatchResult,
    RecommendationsResponse,
)
from aspiro.services.catalog_service import to_career_profile, to_held_skills

logger = get_logger(__name__)

# Feedback that takes a recommendation out of the current set
STALE_FEEDBACK = frozenset({"dismiss", "not_relevant"})


def recommendation_factors(result: MatchResult) -> Dict[str, Any]:
    """The parts of a match result stored next to the score."""
    return result.model_dump(
        mode="json",
        include={"required_skills", "salary_range", "growth_outlook"},
    )


class RecommendationService:
    """Handles career ranking and recommendation feedback."""

    def __init__(self):
        self.user_repo = UserRepository()
        self.career_repo = CareerRepository()
        self.recommendation_repo = CareerRecommendationRepository()

    async def recommend(
        self,
        db: AsyncSession,
        user: User,
    ) -> RecommendationsResponse:
        """
        Score every career against the user's recorded skills.

        Always computed from live skill rows; the cache is written, never read.
        """
        user_skills = await self.user_repo.get_user_skills(db, user.id)
        careers = await self.career_repo.list_with_requirements(db)

        held = index_holdings(to_held_skills(user_skills))
        results = rank_careers(
            (to_career_profile(career) for career in careers),
            held,
            limit=settings.recommendations_limit,
        )

        for result in results:
            await self.recommendation_repo.store(
                db,
                user_id=user.id,
                career_id=result.career_id,
                match_score=result.match_score,
                explanation=result.explanation,
                factors=recommendation_factors(result),
            )
        await db.commit()

        logger.info(
            "career_recommendations_computed",
            user_id=str(user.id),
            careers_scored=len(careers),
            returned=len(results),
            top_score=results[0].match_score if results else None,
        )
        return RecommendationsResponse(recommendations=results)

    async def record_feedback(
        self,
        db: AsyncSession,
        user: User,
        career_id: UUID,
        feedback_type: str,
    ) -> CareerFeedbackResponse:
        """
        Store the user's reaction on the cached recommendation.

        Raises:
            RecommendationNotFoundException: If no recommendation was cached
                for this career.
        """
        row = await self.recommendation_repo.get_for_career(db, user.id, career_id)
        if not row:
            raise RecommendationNotFoundException()

        updates: Dict[str, Any] = {"user_feedback": feedback_type}
        if feedback_type in STALE_FEEDBACK:
            updates["is_current"] = False

        row = await self.recommendation_repo.update(db, row, **updates)
        await db.commit()

        return CareerFeedbackResponse(
            career_id=row.career_id,
            feedback_type=row.user_feedback,
            is_current=row.is_current,
        )
