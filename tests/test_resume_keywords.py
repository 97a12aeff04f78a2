"""Tests for the deterministic resume analysis."""

from uuid import uuid4

import pytest

from aspiro.core.exceptions import InvalidInputException
from aspiro.engine.proficiency import FeedbackCategory, FeedbackPriority, ProficiencyLevel
from aspiro.engine.resume_keywords import (
    analyze_resume,
    build_feedback,
    build_keyword_catalog,
    count_words,
    has_quantifiable_achievements,
    is_formatting_consistent,
    score_feedback,
    uses_action_verbs,
)
from aspiro.engine.types import CareerProfile, SkillRequirement

WELL_FORMED = """
Senior Data Analyst, Acme 2019 - 2023
- Developed SQL dashboards used by 300 users
- Reduced reporting time, improving revenue tracking by 15%
Data Analyst, Initech 2016 - 2019
- Built Python pipelines for sales analytics
"""


def career(name, *skills):
    return CareerProfile(
        career_id=uuid4(),
        name=name,
        requirements=tuple(
            SkillRequirement(
                skill_id=uuid4(),
                skill_name=skill,
                is_essential=essential,
                required_proficiency=ProficiencyLevel.INTERMEDIATE,
            )
            for skill, essential in skills
        ),
    )


CAREERS = [
    career("Data Analyst", ("SQL", True), ("Python", True), ("Tableau", False)),
    career("Senior Data Analyst", ("SQL", True), ("Statistics", True)),
    career("Frontend Developer", ("React", True)),
]


def test_short_resume_with_metrics_gets_brevity_feedback_only():
    analysis = analyze_resume("Managed a team and increased revenue by 20%", "Chef", CAREERS)

    summary = analysis.analysis_summary
    assert summary.word_count == 8
    assert summary.has_quantifiable_achievements is True
    assert summary.uses_action_verbs is True

    content_medium = [
        f for f in analysis.feedback
        if f.category == FeedbackCategory.CONTENT and f.priority == FeedbackPriority.MEDIUM
    ]
    assert len(content_medium) == 1
    assert "too brief" in content_medium[0].issue
    assert not any(f.category == FeedbackCategory.ACHIEVEMENTS for f in analysis.feedback)


def test_keyword_catalog_uses_title_substring_of_career_name():
    catalog = build_keyword_catalog(CAREERS, "data analyst")
    assert catalog.relevant == ("sql", "python", "tableau", "statistics")
    assert catalog.essential == ("sql", "python", "statistics")

    assert build_keyword_catalog(CAREERS, "Plumber").relevant == ()


def test_missing_essential_keywords_drive_high_priority_feedback():
    analysis = analyze_resume(WELL_FORMED, "Data Analyst", CAREERS)

    assert analysis.missing_keywords == ["statistics"]
    assert analysis.relevant_skills_found == ["sql", "python"]
    assert analysis.skill_coverage_percentage == 50
    assert analysis.feedback[0].category == FeedbackCategory.KEYWORDS
    assert analysis.feedback[0].priority == FeedbackPriority.HIGH
    assert analysis.feedback[0].examples == ["statistics"]


def test_missing_keywords_capped_at_ten():
    many = career("Data Engineer", *[(f"tool{i}", True) for i in range(15)])
    analysis = analyze_resume("Some resume text", "Data Engineer", [many])
    assert len(analysis.missing_keywords) == 10
    assert analysis.skill_coverage_percentage == 0


def test_coverage_without_catalog_is_zero():
    analysis = analyze_resume(WELL_FORMED, "Astronaut", CAREERS)
    assert analysis.skill_coverage_percentage == 0
    assert analysis.missing_keywords == []


def test_formatting_requires_bullets_and_repeated_date_pattern():
    assert is_formatting_consistent(WELL_FORMED) is True
    assert is_formatting_consistent("2019 - 2023\n2016 - 2019\nno bullets") is False
    assert is_formatting_consistent("- bullet\nworked 2019 - 2023") is False
    assert is_formatting_consistent("* one\nJan 2020 to March 2021") is True
    # two different formats do not count as consistent
    assert is_formatting_consistent("• a\n01/2020 and 2019 - 2020") is False


def test_text_checks():
    assert has_quantifiable_achievements("Grew users by 40%") is True
    assert has_quantifiable_achievements("Grew users a lot") is False
    assert has_quantifiable_achievements("Worked 5 years") is False
    assert uses_action_verbs("OPTIMIZED the build") is True
    assert uses_action_verbs("Responsible for stuff") is False
    assert count_words("  one\ttwo\nthree  ") == 3


def test_feedback_is_ordered_by_priority():
    feedback = build_feedback(
        missing_essential=["sql"],
        quantifiable=False,
        word_count=900,
        action_verbs=False,
        formatting_consistent=False,
    )
    priorities = [f.priority for f in feedback]
    assert priorities == [
        FeedbackPriority.HIGH,
        FeedbackPriority.HIGH,
        FeedbackPriority.MEDIUM,
        FeedbackPriority.MEDIUM,
        FeedbackPriority.LOW,
    ]
    assert "too lengthy" in feedback[2].issue
    assert score_feedback(feedback) == 100 - 40 - 30


def test_score_never_increases_with_more_high_priority_items():
    base = dict(word_count=400, action_verbs=True, formatting_consistent=True)
    scores = [
        score_feedback(build_feedback(missing_essential=[], quantifiable=True, **base)),
        score_feedback(build_feedback(missing_essential=[], quantifiable=False, **base)),
        score_feedback(build_feedback(missing_essential=["sql"], quantifiable=False, **base)),
    ]
    assert scores == [100, 80, 60]


def test_score_floor_is_zero():
    feedback = build_feedback(
        missing_essential=["a"],
        quantifiable=False,
        word_count=10,
        action_verbs=False,
        formatting_consistent=False,
    )
    assert score_feedback(feedback * 3) == 0


@pytest.mark.parametrize("text, title", [("", "Analyst"), ("   ", "Analyst"), ("resume", " ")])
def test_blank_input_rejected(text, title):
    with pytest.raises(InvalidInputException):
        analyze_resume(text, title, CAREERS)
