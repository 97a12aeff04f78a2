"""
Career match scoring.

Every requirement carries a weight: 3 when essential, 1 otherwise. A held
skill contributes weight x proficiency weight, a missing skill contributes
nothing, and the score is the earned share of the total weight on a 0-100
scale. The explanation text is picked from the score afterwards and never
feeds back into it.
"""
from typing import Iterable, List, Mapping, Sequence
from uuid import UUID

from aspiro.engine.proficiency import proficiency_weight
from aspiro.engine.types import CareerProfile, HeldSkill, SkillRequirement
from aspiro.schemas.career import MatchResult, RequiredSkillStatus
from aspiro.schemas.catalog import SalaryRange

ESSENTIAL_WEIGHT = 3
OPTIONAL_WEIGHT = 1

DEFAULT_RECOMMENDATION_LIMIT = 10


def requirement_weight(requirement: SkillRequirement) -> int:
    return ESSENTIAL_WEIGHT if requirement.is_essential else OPTIONAL_WEIGHT


def compute_match_score(
    held: Mapping[UUID, HeldSkill],
    requirements: Sequence[SkillRequirement],
) -> float:
    """Weighted match percentage, two decimals; 0 for a career with no requirements."""
    total_weight = 0
    earned = 0.0

    for requirement in requirements:
        weight = requirement_weight(requirement)
        total_weight += weight
        holding = held.get(requirement.skill_id)
        if holding is not None:
            earned += weight * proficiency_weight(holding.proficiency_level)

    if total_weight == 0:
        return 0.0
    return round(100 * earned / total_weight, 2)


def explain_match(
    score: float,
    essential_have: int,
    essential_total: int,
    career_name: str,
) -> str:
    """Human-readable summary for a score band."""
    ratio = f"{essential_have}/{essential_total}"
    if score >= 80:
        return (
            f"Excellent match! You have {ratio} essential skills for {career_name}. "
            "Your experience aligns well with this career path."
        )
    if score >= 60:
        return (
            f"Good match! You have {ratio} essential skills for {career_name}. "
            "With some additional learning, this could be a great fit."
        )
    if score >= 40:
        return (
            f"Moderate match. You have {ratio} essential skills for {career_name}. "
            "Consider developing more relevant skills to strengthen your candidacy."
        )
    return (
        f"This role requires significant skill development. You currently have {ratio} "
        f"essential skills for {career_name}, but it could be a good long-term goal."
    )


def score_career(career: CareerProfile, held: Mapping[UUID, HeldSkill]) -> MatchResult:
    """Score one career against the user's holdings."""
    statuses: List[RequiredSkillStatus] = []
    essential_total = 0
    essential_have = 0

    for requirement in career.requirements:
        user_has = requirement.skill_id in held
        if requirement.is_essential:
            essential_total += 1
            if user_has:
                essential_have += 1
        statuses.append(
            RequiredSkillStatus(
                skill_id=requirement.skill_id,
                skill_name=requirement.skill_name,
                is_essential=requirement.is_essential,
                required_proficiency=requirement.required_proficiency,
                user_has=user_has,
            )
        )

    score = compute_match_score(held, career.requirements)

    return MatchResult(
        career_id=career.career_id,
        career_name=career.name,
        description=career.description,
        match_score=score,
        explanation=explain_match(score, essential_have, essential_total, career.name),
        required_skills=statuses,
        salary_range=SalaryRange(min=career.salary_min or 0, max=career.salary_max or 0),
        growth_outlook=career.growth_outlook,
    )


def rank_careers(
    careers: Iterable[CareerProfile],
    held: Mapping[UUID, HeldSkill],
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
) -> List[MatchResult]:
    """
    Score every career and return the best `limit`, highest score first.

    Equal scores are ordered by ascending career id so the ranking does not
    depend on the order rows came back from the store.
    """
    results = [score_career(career, held) for career in careers]
    results.sort(key=lambda r: (-r.match_score, str(r.career_id)))
    return results[:limit]
