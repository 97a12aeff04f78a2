"""
Industry trend schemas.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from aspiro.schemas.base import BaseSchema, IDSchema, require_text

InsightType = Literal["Emerging Role", "Skill Demand", "Industry Shift", "Market Trend"]
SubscriptionType = Literal["industry", "skill"]


class InsightResponse(IDSchema):
    title: str
    summary: Optional[str] = None
    insight_type: InsightType
    relevant_careers: List[str] = []
    relevant_skills: List[str] = []
    generated_date: datetime


class CategorizedInsights(BaseSchema):
    emerging_roles: List[InsightResponse] = []
    skill_demand: List[InsightResponse] = []
    industry_shifts: List[InsightResponse] = []
    market_trends: List[InsightResponse] = []


class TrendingSkill(BaseSchema):
    skill: str
    mentions: int


class SubscriptionCreate(BaseSchema):
    subscription_type: SubscriptionType
    target: str = Field(..., max_length=100)

    @field_validator("target")
    @classmethod
    def target_required(cls, v: str) -> str:
        return require_text(v, "target")


class SubscriptionResponse(IDSchema):
    subscription_type: SubscriptionType
    target: str
    is_active: bool
    created_at: datetime


class IndustryTrendsResponse(BaseSchema):
    insights: CategorizedInsights
    trending_skills: List[TrendingSkill]
    personalized_insights: List[InsightResponse] = []
    user_subscriptions: List[SubscriptionResponse] = []
    total_insights: int
    last_updated: Optional[datetime] = None
