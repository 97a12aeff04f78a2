"""
Plain value objects the scorers consume.

Services build these from ORM rows so the scorers stay free of any session
or lazy-loading concerns.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple, Union
from uuid import UUID

from aspiro.engine.proficiency import GrowthOutlook, ProficiencyLevel


@dataclass(frozen=True)
class HeldSkill:
    """A skill the user has recorded, with its edge attributes."""

    skill_id: UUID
    skill_name: str
    proficiency_level: Union[ProficiencyLevel, str, None]
    years_experience: Optional[float] = None


@dataclass(frozen=True)
class SkillRequirement:
    """One required skill of a career."""

    skill_id: UUID
    skill_name: str
    is_essential: bool
    required_proficiency: ProficiencyLevel
    skill_category: Optional[str] = None


@dataclass(frozen=True)
class CareerProfile:
    """A career together with its ordered requirements."""

    career_id: UUID
    name: str
    description: Optional[str] = None
    salary_min: int = 0
    salary_max: int = 0
    growth_outlook: Optional[GrowthOutlook] = None
    requirements: Tuple[SkillRequirement, ...] = field(default_factory=tuple)


def index_holdings(holdings: Iterable[HeldSkill]) -> Dict[UUID, HeldSkill]:
    """Key holdings by skill id; a later row for the same skill wins."""
    return {holding.skill_id: holding for holding in holdings}
