"""
Skill catalog and career reference-data schemas.
"""
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from aspiro.engine.proficiency import GrowthOutlook, ProficiencyLevel
from aspiro.schemas.base import BaseSchema, IDSchema


class SalaryRange(BaseSchema):
    """Annual salary band for a career."""

    min: int = 0
    max: int = 0


class SkillResponse(IDSchema):
    """Skill catalog entry."""

    name: str
    category: Optional[str] = None
    description: Optional[str] = None


class CareerRequirementResponse(BaseSchema):
    """A required skill as listed on a career."""

    skill_id: UUID
    skill_name: str
    skill_category: Optional[str] = None
    is_essential: bool
    required_proficiency: ProficiencyLevel


class CareerSummary(IDSchema):
    """Career list item."""

    name: str
    description: Optional[str] = None
    industry: Optional[str] = None
    salary_range: SalaryRange = Field(default_factory=SalaryRange)
    growth_outlook: Optional[GrowthOutlook] = None


class CareerDetail(CareerSummary):
    """Career with its ordered requirements."""

    requirements: List[CareerRequirementResponse] = []
