"""
Industry trends service - categorised insights, trending skills and, for a
signed-in user, insights that touch their recorded skills.
"""
from collections import Counter
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.core.logging import get_logger
from aspiro.models.industry_insight import IndustryInsight
from aspiro.models.user import User
from aspiro.repositories.insight_repository import (
    IndustryInsightRepository,
    UserSubscriptionRepository,
)
from aspiro.repositories.user_repository import UserRepository
from aspiro.schemas.trends import (
    CategorizedInsights,
    IndustryTrendsResponse,
    InsightResponse,
    SubscriptionResponse,
    TrendingSkill,
)

logger = get_logger(__name__)

TRENDING_SKILLS_LIMIT = 10
PERSONALIZED_LIMIT = 5

_CATEGORY_FIELDS = {
    "Emerging Role": "emerging_roles",
    "Skill Demand": "skill_demand",
    "Industry Shift": "industry_shifts",
    "Market Trend": "market_trends",
}


def trending_skills(insights: List[InsightResponse]) -> List[TrendingSkill]:
    """Skill mention counts, most mentioned first; ties keep first-seen order."""
    counts = Counter(skill for insight in insights for skill in insight.relevant_skills)
    return [
        TrendingSkill(skill=skill, mentions=mentions)
        for skill, mentions in counts.most_common(TRENDING_SKILLS_LIMIT)
    ]


def categorize(insights: List[InsightResponse]) -> CategorizedInsights:
    buckets = {field: [] for field in _CATEGORY_FIELDS.values()}
    for insight in insights:
        buckets[_CATEGORY_FIELDS[insight.insight_type]].append(insight)
    return CategorizedInsights(**buckets)


class TrendsService:
    """Handles the industry trends feed."""

    def __init__(self):
        self.insight_repo = IndustryInsightRepository()
        self.subscription_repo = UserSubscriptionRepository()
        self.user_repo = UserRepository()

    async def get_trends(
        self,
        db: AsyncSession,
        user: Optional[User],
        *,
        industry: Optional[str] = None,
        skill: Optional[str] = None,
        limit: int = 10,
    ) -> IndustryTrendsResponse:
        rows = await self.insight_repo.list_active(db)
        rows = [
            row
            for row in rows
            if self._known_type(row) and self._matches(row, industry, skill)
        ][:limit]
        insights = [InsightResponse.model_validate(row) for row in rows]

        personalized: List[InsightResponse] = []
        subscriptions: List[SubscriptionResponse] = []
        if user is not None:
            skill_names = set(await self.user_repo.get_user_skill_names(db, user.id))
            personalized = [
                insight
                for insight in insights
                if skill_names.intersection(insight.relevant_skills)
            ][:PERSONALIZED_LIMIT]
            subscriptions = [
                SubscriptionResponse.model_validate(row)
                for row in await self.subscription_repo.list_active(db, user.id)
            ]

        return IndustryTrendsResponse(
            insights=categorize(insights),
            trending_skills=trending_skills(insights),
            personalized_insights=personalized,
            user_subscriptions=subscriptions,
            total_insights=len(insights),
            last_updated=insights[0].generated_date if insights else None,
        )

    @staticmethod
    def _known_type(row: IndustryInsight) -> bool:
        if row.insight_type in _CATEGORY_FIELDS:
            return True
        logger.warning("insight_type_unknown", insight_id=str(row.id), insight_type=row.insight_type)
        return False

    @staticmethod
    def _matches(
        row: IndustryInsight,
        industry: Optional[str],
        skill: Optional[str],
    ) -> bool:
        if industry and industry not in (row.relevant_careers or []):
            return False
        if skill and skill not in (row.relevant_skills or []):
            return False
        return True
