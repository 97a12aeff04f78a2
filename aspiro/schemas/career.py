"""
Career recommendation schemas.
"""
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import Field

from aspiro.engine.proficiency import GrowthOutlook, ProficiencyLevel
from aspiro.schemas.base import BaseSchema
from aspiro.schemas.catalog import SalaryRange

FeedbackType = Literal["like", "dismiss", "interested", "not_relevant"]


class RequiredSkillStatus(BaseSchema):
    """A career requirement annotated with whether the user holds the skill."""

    skill_id: UUID
    skill_name: str
    is_essential: bool
    required_proficiency: ProficiencyLevel
    user_has: bool


class MatchResult(BaseSchema):
    """How well one user's skills fit one career."""

    career_id: UUID
    career_name: str
    description: Optional[str] = None
    match_score: float = Field(..., ge=0, le=100)
    explanation: str
    required_skills: List[RequiredSkillStatus] = []
    salary_range: SalaryRange = Field(default_factory=SalaryRange)
    growth_outlook: Optional[GrowthOutlook] = None


class RecommendationsResponse(BaseSchema):
    """Top career matches, best first."""

    recommendations: List[MatchResult]


class CareerFeedbackRequest(BaseSchema):
    """Reaction to a cached recommendation."""

    feedback_type: FeedbackType


class CareerFeedbackResponse(BaseSchema):
    career_id: UUID
    feedback_type: FeedbackType
    is_current: bool
