"""
Industry trends routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.api.deps import get_optional_user
from aspiro.core.database import get_db
from aspiro.models.user import User
from aspiro.schemas.trends import IndustryTrendsResponse
from aspiro.services.trends_service import TrendsService

router = APIRouter(tags=["trends"])

trends_service = TrendsService()


@router.get("/industry-trends", response_model=IndustryTrendsResponse)
async def industry_trends(
    industry: Optional[str] = Query(None, description="Keep insights relevant to this career"),
    skill: Optional[str] = Query(None, description="Keep insights relevant to this skill"),
    limit: int = Query(10, ge=1, le=100),
    current_user: Optional[User] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Latest industry insights grouped by type, with trending skills.

    Signed-in users also get insights touching their own skills and their
    active subscriptions.
    """
    return await trends_service.get_trends(
        db,
        current_user,
        industry=industry,
        skill=skill,
        limit=limit,
    )
