"""
Career recommendation and skill gap routes.
"""
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.api.deps import get_current_user
from aspiro.core.database import get_db
from aspiro.models.user import User
from aspiro.schemas.career import (
    CareerFeedbackRequest,
    CareerFeedbackResponse,
    RecommendationsResponse,
)
from aspiro.schemas.skill_gap import SkillGapAnalysisResponse, SkillGapRequest
from aspiro.services.recommendation_service import RecommendationService
from aspiro.services.skill_gap_service import SkillGapService

router = APIRouter(tags=["careers"])

recommendation_service = RecommendationService()
skill_gap_service = SkillGapService()


@router.post("/career-recommendations", response_model=RecommendationsResponse)
async def career_recommendations(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Top career matches for the current user, best first.

    Scores are recomputed from the user's recorded skills on every call.
    """
    return await recommendation_service.recommend(db, current_user)


@router.post(
    "/career-recommendations/{career_id}/feedback",
    response_model=CareerFeedbackResponse,
)
async def career_recommendation_feedback(
    career_id: UUID,
    body: CareerFeedbackRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await recommendation_service.record_feedback(
        db, current_user, career_id, body.feedback_type
    )


@router.post("/skill-gap-analysis", response_model=SkillGapAnalysisResponse)
async def skill_gap_analysis(
    body: SkillGapRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Skills the user lacks for the target career, with learning resources."""
    return await skill_gap_service.analyze(db, current_user, body.target_career_id)
