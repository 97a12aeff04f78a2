"""Tests for career match scoring and ranking."""

import itertools
from uuid import UUID, uuid4

import pytest

from aspiro.engine.career_match import (
    compute_match_score,
    explain_match,
    rank_careers,
    score_career,
)
from aspiro.engine.proficiency import ProficiencyLevel, proficiency_rank, proficiency_weight
from aspiro.engine.types import CareerProfile, HeldSkill, SkillRequirement, index_holdings

SQL = uuid4()
PYTHON = uuid4()
EXCEL = uuid4()


def requirement(skill_id, essential=True, level=ProficiencyLevel.INTERMEDIATE, name="Skill"):
    return SkillRequirement(
        skill_id=skill_id,
        skill_name=name,
        is_essential=essential,
        required_proficiency=level,
    )


def held(*pairs):
    return index_holdings(HeldSkill(skill_id=sid, skill_name="x", proficiency_level=level) for sid, level in pairs)


def career(name, requirements, career_id=None):
    return CareerProfile(career_id=career_id or uuid4(), name=name, requirements=tuple(requirements))


def test_essential_skill_at_intermediate_scores_seventy():
    requirements = [requirement(SQL, essential=True, level=ProficiencyLevel.ADVANCED, name="SQL")]
    score = compute_match_score(held((SQL, "Intermediate")), requirements)
    assert score == 70.0


def test_no_requirements_scores_zero():
    assert compute_match_score(held((SQL, "Advanced")), []) == 0.0
    assert score_career(career("Empty", []), {}).match_score == 0.0


def test_missing_skills_contribute_nothing():
    requirements = [requirement(SQL), requirement(PYTHON, essential=False)]
    assert compute_match_score({}, requirements) == 0.0


def test_weighted_mix_rounds_to_two_decimals():
    # (3 * 1.0 + 1 * 0.4) / 4 = 85.0 ; (3 * 0.7 + 1 * 0) / 4 = 52.5
    requirements = [requirement(SQL), requirement(PYTHON, essential=False)]
    assert compute_match_score(held((SQL, "Advanced"), (PYTHON, "Beginner")), requirements) == 85.0
    assert compute_match_score(held((SQL, "Intermediate")), requirements) == 52.5

    three = [requirement(SQL), requirement(PYTHON), requirement(EXCEL)]
    assert compute_match_score(held((SQL, "Advanced")), three) == 33.33


def test_unknown_and_missing_levels():
    requirements = [requirement(SQL)]
    assert compute_match_score(held((SQL, "Expert")), requirements) == 20.0
    assert compute_match_score(held((SQL, None)), requirements) == 40.0
    assert compute_match_score(held((SQL, "advanced")), requirements) == 100.0


def test_score_always_within_bounds():
    levels = [None, "Beginner", "Intermediate", "Advanced", "Guru"]
    requirements = [
        requirement(SQL, essential=True),
        requirement(PYTHON, essential=False, level=ProficiencyLevel.ADVANCED),
        requirement(EXCEL, essential=True, level=ProficiencyLevel.BEGINNER),
    ]
    for combo in itertools.product(levels + ["absent"], repeat=3):
        holdings = held(*[(sid, lvl) for sid, lvl in zip((SQL, PYTHON, EXCEL), combo) if lvl != "absent"])
        score = compute_match_score(holdings, requirements)
        assert 0 <= score <= 100


def test_score_grows_with_proficiency():
    requirements = [requirement(SQL)]
    scores = [
        compute_match_score(held((SQL, level)), requirements)
        for level in ("Beginner", "Intermediate", "Advanced")
    ]
    assert scores == sorted(scores)
    assert len(set(scores)) == 3


def test_scoring_is_deterministic():
    profile = career("Data Analyst", [requirement(SQL), requirement(PYTHON, essential=False)])
    holdings = held((SQL, "Intermediate"), (PYTHON, "Advanced"))
    first = score_career(profile, holdings)
    second = score_career(profile, holdings)
    assert first.match_score == second.match_score
    assert first == second


def test_required_skills_are_annotated_in_order():
    profile = career(
        "Data Analyst",
        [requirement(SQL, name="SQL"), requirement(PYTHON, essential=False, name="Python")],
    )
    result = score_career(profile, held((PYTHON, "Beginner")))
    assert [(s.skill_name, s.user_has) for s in result.required_skills] == [
        ("SQL", False),
        ("Python", True),
    ]
    assert "0/1 essential skills" in result.explanation


@pytest.mark.parametrize(
    "score, phrase",
    [
        (80, "Excellent match"),
        (79.99, "Good match"),
        (60, "Good match"),
        (40, "Moderate match"),
        (39.99, "significant skill development"),
        (0, "significant skill development"),
    ],
)
def test_explanation_bands(score, phrase):
    text = explain_match(score, 2, 3, "Data Analyst")
    assert phrase in text
    assert "2/3" in text
    assert "Data Analyst" in text


def test_ranking_sorts_descending_and_limits():
    careers = [
        career(f"Career {i}", [requirement(SQL, essential=i % 2 == 0), requirement(PYTHON)])
        for i in range(15)
    ]
    results = rank_careers(careers, held((SQL, "Advanced")), limit=10)
    assert len(results) == 10
    scores = [r.match_score for r in results]
    assert scores == sorted(scores, reverse=True)


def test_equal_scores_break_ties_by_career_id():
    ids = [UUID(int=3), UUID(int=1), UUID(int=2)]
    careers = [career(f"C{i}", [requirement(SQL)], career_id=cid) for i, cid in enumerate(ids)]
    results = rank_careers(careers, held((SQL, "Advanced")))
    assert [r.career_id for r in results] == sorted(ids, key=str)

    reversed_results = rank_careers(list(reversed(careers)), held((SQL, "Advanced")))
    assert [r.career_id for r in reversed_results] == [r.career_id for r in results]


def test_proficiency_scale_is_monotonic():
    levels = list(ProficiencyLevel)
    assert [proficiency_rank(level) for level in levels] == [1, 2, 3]
    weights = [proficiency_weight(level) for level in levels]
    assert weights == sorted(weights)
    assert proficiency_rank(None) == proficiency_rank("Beginner")
    assert proficiency_rank("  ") == 1
    assert proficiency_rank("Expert") == 0
