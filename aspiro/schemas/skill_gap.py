"""
Skill gap analysis schemas.
"""
from typing import List, Optional
from uuid import UUID

from pydantic import field_validator

from aspiro.engine.proficiency import GapSeverity, ProficiencyLevel
from aspiro.schemas.base import BaseSchema, require_text


class SkillGapRequest(BaseSchema):
    """Request body for skill-gap-analysis."""

    target_career_id: str

    @field_validator("target_career_id")
    @classmethod
    def career_id_required(cls, v: str) -> str:
        return require_text(v, "target_career_id")


class LearningResourceResponse(BaseSchema):
    """A course, book or tutorial that teaches one skill."""

    id: UUID
    title: str
    description: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    provider: Optional[str] = None
    duration_hours: Optional[float] = None
    difficulty_level: Optional[str] = None
    rating: Optional[float] = None
    price_usd: Optional[float] = None


class SkillGap(BaseSchema):
    """A required skill the user lacks or holds below the required level."""

    skill_id: UUID
    skill_name: str
    skill_category: Optional[str] = None
    is_essential: bool
    required_proficiency: ProficiencyLevel
    current_proficiency: Optional[str] = None  # the recorded label; None when the skill is not held
    gap_severity: GapSeverity
    learning_resources: List[LearningResourceResponse] = []


class SkillGapSummary(BaseSchema):
    total_skills_required: int
    skills_you_have: int
    critical_gaps: int
    important_gaps: int
    nice_to_have_gaps: int
    estimated_learning_time: float  # hours


class CareerBrief(BaseSchema):
    id: UUID
    name: str
    description: Optional[str] = None


class SkillGapAnalysisResponse(BaseSchema):
    career: CareerBrief
    skill_gaps: List[SkillGap]
    summary: SkillGapSummary
