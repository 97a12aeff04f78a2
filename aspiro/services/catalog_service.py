"""
Catalog service - skills and careers, plus the ORM-to-engine conversions the
scoring services share.
"""
from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.core.exceptions import CareerNotFoundException
from aspiro.engine.proficiency import GrowthOutlook, ProficiencyLevel
from aspiro.engine.types import CareerProfile, HeldSkill, SkillRequirement
from aspiro.models.career import Career, CareerSkill
from aspiro.models.user_skill import UserSkill
from aspiro.repositories.catalog_repository import CareerRepository, SkillRepository
from aspiro.schemas.catalog import (
    CareerDetail,
    CareerRequirementResponse,
    CareerSummary,
    SalaryRange,
    SkillResponse,
)


def parse_career_id(value: str) -> UUID:
    """
    Parse a career id supplied by a client.

    A malformed id cannot name an existing career, so it is reported the
    same way as an unknown one.
    """
    try:
        return UUID(str(value).strip())
    except ValueError:
        raise CareerNotFoundException()


def parse_growth_outlook(value: Optional[str]) -> Optional[GrowthOutlook]:
    if not value:
        return None
    try:
        return GrowthOutlook(value)
    except ValueError:
        return None


def to_requirement(row: CareerSkill) -> SkillRequirement:
    return SkillRequirement(
        skill_id=row.skill_id,
        skill_name=row.skill.name,
        is_essential=bool(row.is_essential),
        required_proficiency=(
            ProficiencyLevel.parse(row.proficiency_level) or ProficiencyLevel.INTERMEDIATE
        ),
        skill_category=row.skill.category,
    )


def to_career_profile(career: Career) -> CareerProfile:
    """Requirements must be eagerly loaded."""
    return CareerProfile(
        career_id=career.id,
        name=career.name,
        description=career.description,
        salary_min=career.average_salary_min or 0,
        salary_max=career.average_salary_max or 0,
        growth_outlook=parse_growth_outlook(career.growth_outlook),
        requirements=tuple(to_requirement(row) for row in career.requirements),
    )


def to_held_skills(rows: Iterable[UserSkill]) -> List[HeldSkill]:
    """User skill rows must have `skill` loaded."""
    return [
        HeldSkill(
            skill_id=row.skill_id,
            skill_name=row.skill.name,
            proficiency_level=row.proficiency_level,
            years_experience=row.years_experience,
        )
        for row in rows
    ]


class CatalogService:
    """Read-only access to the skill catalog and careers."""

    def __init__(self):
        self.skill_repo = SkillRepository()
        self.career_repo = CareerRepository()

    async def list_skills(
        self,
        db: AsyncSession,
        *,
        category: Optional[str] = None,
    ) -> List[SkillResponse]:
        skills = await self.skill_repo.list_skills(db, category=category)
        return [SkillResponse.model_validate(skill) for skill in skills]

    async def list_careers(self, db: AsyncSession) -> List[CareerSummary]:
        careers = await self.career_repo.list_with_requirements(db)
        return [self._to_summary(career) for career in careers]

    async def get_career(self, db: AsyncSession, career_id: UUID) -> CareerDetail:
        """
        Career with its ordered requirements.

        Raises:
            CareerNotFoundException: If the career doesn't exist.
        """
        career = await self.career_repo.get_with_requirements(db, career_id)
        if not career:
            raise CareerNotFoundException()

        profile = to_career_profile(career)
        return CareerDetail(
            **self._to_summary(career).model_dump(),
            requirements=[
                CareerRequirementResponse(
                    skill_id=r.skill_id,
                    skill_name=r.skill_name,
                    skill_category=r.skill_category,
                    is_essential=r.is_essential,
                    required_proficiency=r.required_proficiency,
                )
                for r in profile.requirements
            ],
        )

    def _to_summary(self, career: Career) -> CareerSummary:
        return CareerSummary(
            id=career.id,
            name=career.name,
            description=career.description,
            industry=career.industry,
            salary_range=SalaryRange(
                min=career.average_salary_min or 0,
                max=career.average_salary_max or 0,
            ),
            growth_outlook=parse_growth_outlook(career.growth_outlook),
        )
