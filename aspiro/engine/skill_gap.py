"""
Skill gap detection.

A requirement is gapped when the user has no record of the skill, or holds it
at a lower rank than required. Severity depends only on the requirement:
essential skills are Critical, Advanced-level optional skills Important,
everything else Nice to Have.
"""
from typing import Dict, List, Mapping, Optional, Sequence
from uuid import UUID

from aspiro.engine.proficiency import (
    GapSeverity,
    ProficiencyLevel,
    proficiency_rank,
    recorded_label,
)
from aspiro.engine.types import HeldSkill, SkillRequirement
from aspiro.schemas.skill_gap import LearningResourceResponse, SkillGap, SkillGapSummary

MAX_RESOURCES_PER_GAP = 5


def has_gap(holding: Optional[HeldSkill], requirement: SkillRequirement) -> bool:
    if holding is None:
        return True
    return proficiency_rank(holding.proficiency_level) < proficiency_rank(
        requirement.required_proficiency
    )


def classify_severity(requirement: SkillRequirement) -> GapSeverity:
    if requirement.is_essential:
        return GapSeverity.CRITICAL
    if requirement.required_proficiency == ProficiencyLevel.ADVANCED:
        return GapSeverity.IMPORTANT
    return GapSeverity.NICE_TO_HAVE


def detect_skill_gaps(
    held: Mapping[UUID, HeldSkill],
    requirements: Sequence[SkillRequirement],
) -> List[SkillGap]:
    """Gapped requirements, Critical first; requirement order is kept within a severity."""
    gaps: List[SkillGap] = []

    for requirement in requirements:
        holding = held.get(requirement.skill_id)
        if not has_gap(holding, requirement):
            continue
        gaps.append(
            SkillGap(
                skill_id=requirement.skill_id,
                skill_name=requirement.skill_name,
                skill_category=requirement.skill_category,
                is_essential=requirement.is_essential,
                required_proficiency=requirement.required_proficiency,
                current_proficiency=(
                    recorded_label(holding.proficiency_level) if holding else None
                ),
                gap_severity=classify_severity(requirement),
            )
        )

    # list.sort is stable
    gaps.sort(key=lambda gap: gap.gap_severity.order)
    return gaps


def attach_learning_resources(
    gaps: Sequence[SkillGap],
    resources_by_skill: Mapping[UUID, Sequence[LearningResourceResponse]],
    limit: int = MAX_RESOURCES_PER_GAP,
) -> List[SkillGap]:
    """Copy of `gaps` with up to `limit` resources each, in the order supplied."""
    return [
        gap.model_copy(
            update={"learning_resources": list(resources_by_skill.get(gap.skill_id, ()))[:limit]}
        )
        for gap in gaps
    ]


def _average_duration(resources: Sequence[LearningResourceResponse]) -> float:
    if not resources:
        return 0.0
    return sum(r.duration_hours or 0 for r in resources) / len(resources)


def summarize_skill_gaps(total_required: int, gaps: Sequence[SkillGap]) -> SkillGapSummary:
    counts: Dict[GapSeverity, int] = {severity: 0 for severity in GapSeverity}
    for gap in gaps:
        counts[gap.gap_severity] += 1

    learning_time = sum(_average_duration(gap.learning_resources) for gap in gaps)

    return SkillGapSummary(
        total_skills_required=total_required,
        skills_you_have=total_required - len(gaps),
        critical_gaps=counts[GapSeverity.CRITICAL],
        important_gaps=counts[GapSeverity.IMPORTANT],
        nice_to_have_gaps=counts[GapSeverity.NICE_TO_HAVE],
        estimated_learning_time=round(learning_time, 2),
    )
