"""Helpers that write catalog and user rows straight through the ORM."""

from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.core.security import create_access_token, hash_password
from aspiro.models import (
    Career,
    CareerSkill,
    IndustryInsight,
    LearningResource,
    Skill,
    User,
    UserSkill,
)

API = "/api/v1"


async def create_user(db: AsyncSession, email: str = "ada@example.com") -> User:
    user = User(email=email, password_hash=hash_password("password123"), full_name="Ada")
    db.add(user)
    await db.commit()
    return user


def auth_headers(user: User) -> Dict[str, str]:
    token = create_access_token(user.id)
    return {"Authorization": f"Bearer {token}"}


async def create_skills(db: AsyncSession, *names: str, category: str = "Technical") -> Dict[str, Skill]:
    skills = {name: Skill(name=name, category=category) for name in names}
    db.add_all(skills.values())
    await db.commit()
    return skills


async def create_career(
    db: AsyncSession,
    name: str,
    requirements: Iterable[Tuple[Skill, bool, str]],
    *,
    salary: Tuple[int, int] = (50000, 90000),
    growth_outlook: Optional[str] = "High",
) -> Career:
    career = Career(
        name=name,
        description=f"{name} description",
        industry="Technology",
        average_salary_min=salary[0],
        average_salary_max=salary[1],
        growth_outlook=growth_outlook,
    )
    db.add(career)
    await db.flush()
    for position, (skill, essential, level) in enumerate(requirements):
        db.add(
            CareerSkill(
                career_id=career.id,
                skill_id=skill.id,
                is_essential=essential,
                proficiency_level=level,
                position=position,
            )
        )
    await db.commit()
    return career


async def give_skill(db: AsyncSession, user: User, skill: Skill, level: str) -> UserSkill:
    row = UserSkill(user_id=user.id, skill_id=skill.id, proficiency_level=level)
    db.add(row)
    await db.commit()
    return row


async def create_resource(
    db: AsyncSession,
    skill: Skill,
    title: str,
    *,
    rating: Optional[float] = 4.0,
    hours: Optional[float] = 10,
) -> LearningResource:
    resource = LearningResource(
        skill_id=skill.id,
        title=title,
        resource_type="Course",
        provider="Example",
        duration_hours=hours,
        rating=rating,
    )
    db.add(resource)
    await db.commit()
    return resource


async def create_insight(
    db: AsyncSession,
    title: str,
    insight_type: str = "Skill Demand",
    *,
    careers=(),
    skills=(),
    age_days: int = 0,
    is_active: bool = True,
) -> IndustryInsight:
    insight = IndustryInsight(
        title=title,
        summary=f"{title} summary",
        insight_type=insight_type,
        relevant_careers=list(careers),
        relevant_skills=list(skills),
        generated_date=datetime.now(timezone.utc) - timedelta(days=age_days),
        is_active=is_active,
    )
    db.add(insight)
    await db.commit()
    return insight
