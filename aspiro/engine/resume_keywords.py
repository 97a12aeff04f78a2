"""
Deterministic resume analysis.

The keyword source is the skill catalog: every skill required by a career
whose name contains the target job title (case-insensitive) is relevant, and
those flagged essential on at least one such career must appear in the
resume. Around that sit four text checks (quantified achievements, action
verbs, length, formatting), each reported as a boolean and turned into
prioritised feedback by fixed rules.

This is the canonical analysis; a model-generated one is only ever used when
it validates against the same schema.
"""
import re
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from aspiro.core.exceptions import InvalidInputException
from aspiro.engine.proficiency import FeedbackCategory, FeedbackPriority
from aspiro.engine.types import CareerProfile
from aspiro.schemas.resume import AnalysisSummary, FeedbackItem, ResumeAnalysis

ACTION_VERBS = (
    "achieved",
    "built",
    "created",
    "developed",
    "implemented",
    "improved",
    "led",
    "managed",
    "optimized",
    "reduced",
)

_DIGITS = re.compile(r"\d+")
_METRIC_INDICATORS = re.compile(
    r"\$|revenue|sales|users|customers|growth|increase|decrease|improve",
    re.IGNORECASE,
)
_BULLET = re.compile(r"^[•\-\*]")
_MONTHS = (
    r"jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?"
)
DATE_PATTERNS = (
    re.compile(r"\b\d{4}\s*[-–]\s*\d{4}\b"),                        # 2019 - 2023
    re.compile(r"\b\d{1,2}/\d{4}\b"),                                # 01/2020
    re.compile(rf"\b(?:{_MONTHS})\.?\s+\d{{4}}\b", re.IGNORECASE),   # January 2020
)

BRIEF_WORD_LIMIT = 200
LENGTHY_WORD_LIMIT = 800
MAX_MISSING_KEYWORDS = 10

HIGH_PRIORITY_PENALTY = 20
OTHER_PRIORITY_PENALTY = 10


@dataclass(frozen=True)
class KeywordCatalog:
    """Lower-cased skill names, in first-seen order."""

    relevant: Tuple[str, ...] = ()
    essential: Tuple[str, ...] = ()


def build_keyword_catalog(careers: Iterable[CareerProfile], target_job_title: str) -> KeywordCatalog:
    """Collect keywords from careers whose name contains the target title."""
    title = target_job_title.strip().lower()
    relevant: dict = {}
    essential: dict = {}

    for career in careers:
        if title not in career.name.lower():
            continue
        for requirement in career.requirements:
            keyword = requirement.skill_name.lower()
            relevant.setdefault(keyword, None)
            if requirement.is_essential:
                essential.setdefault(keyword, None)

    return KeywordCatalog(relevant=tuple(relevant), essential=tuple(essential))


def count_words(text: str) -> int:
    return len(text.split())


def has_quantifiable_achievements(text: str) -> bool:
    return bool(_DIGITS.search(text)) and bool(_METRIC_INDICATORS.search(text))


def uses_action_verbs(text: str) -> bool:
    lowered = text.lower()
    return any(verb in lowered for verb in ACTION_VERBS)


def is_formatting_consistent(text: str) -> bool:
    """Bulleted lines plus one date format used at least twice."""
    has_bullets = any(_BULLET.match(line.strip()) for line in text.splitlines())
    has_consistent_dates = any(len(pattern.findall(text)) >= 2 for pattern in DATE_PATTERNS)
    return has_bullets and has_consistent_dates


def split_keywords(text: str, keywords: Sequence[str]) -> Tuple[List[str], List[str]]:
    """(found, missing) by case-insensitive substring match."""
    lowered = text.lower()
    found = [k for k in keywords if k in lowered]
    missing = [k for k in keywords if k not in lowered]
    return found, missing


def build_feedback(
    *,
    missing_essential: Sequence[str],
    quantifiable: bool,
    word_count: int,
    action_verbs: bool,
    formatting_consistent: bool,
) -> List[FeedbackItem]:
    """Rule-based feedback, High before Medium before Low."""
    feedback: List[FeedbackItem] = []

    if missing_essential:
        feedback.append(
            FeedbackItem(
                category=FeedbackCategory.KEYWORDS,
                priority=FeedbackPriority.HIGH,
                issue="Missing essential keywords for the target role",
                suggestion=(
                    "Consider adding these essential skills to your resume: "
                    + ", ".join(missing_essential[:5])
                ),
                examples=list(missing_essential[:3]),
            )
        )

    if not quantifiable:
        feedback.append(
            FeedbackItem(
                category=FeedbackCategory.ACHIEVEMENTS,
                priority=FeedbackPriority.HIGH,
                issue="Lack of quantifiable achievements",
                suggestion="Add specific numbers, percentages, and metrics to demonstrate your impact",
                examples=[
                    "Increased team productivity by 25%",
                    "Managed a budget of $500K",
                    "Led a team of 8 developers",
                ],
            )
        )

    if word_count < BRIEF_WORD_LIMIT:
        feedback.append(
            FeedbackItem(
                category=FeedbackCategory.CONTENT,
                priority=FeedbackPriority.MEDIUM,
                issue="Resume appears too brief",
                suggestion=(
                    "Consider expanding on your experiences and achievements. "
                    "Aim for 300-600 words."
                ),
            )
        )
    elif word_count > LENGTHY_WORD_LIMIT:
        feedback.append(
            FeedbackItem(
                category=FeedbackCategory.CONTENT,
                priority=FeedbackPriority.MEDIUM,
                issue="Resume may be too lengthy",
                suggestion=(
                    "Consider condensing your content. "
                    "Focus on the most relevant and impactful experiences."
                ),
            )
        )

    if not action_verbs:
        feedback.append(
            FeedbackItem(
                category=FeedbackCategory.CONTENT,
                priority=FeedbackPriority.MEDIUM,
                issue="Limited use of strong action verbs",
                suggestion=(
                    "Start bullet points with powerful action verbs "
                    "to make your achievements more impactful"
                ),
                examples=["Developed", "Implemented", "Led", "Optimized", "Achieved"],
            )
        )

    if not formatting_consistent:
        feedback.append(
            FeedbackItem(
                category=FeedbackCategory.FORMATTING,
                priority=FeedbackPriority.LOW,
                issue="Inconsistent formatting detected",
                suggestion="Ensure consistent formatting for dates, bullet points, and section headers",
            )
        )

    feedback.sort(key=lambda item: item.priority.order)
    return feedback


def score_feedback(feedback: Sequence[FeedbackItem]) -> int:
    high = sum(1 for item in feedback if item.priority == FeedbackPriority.HIGH)
    other = len(feedback) - high
    return max(0, 100 - HIGH_PRIORITY_PENALTY * high - OTHER_PRIORITY_PENALTY * other)


def analyze_resume(
    resume_text: str,
    target_job_title: str,
    careers: Iterable[CareerProfile],
) -> ResumeAnalysis:
    """
    Score a resume for a target job title.

    Raises:
        InvalidInputException: If the resume text or job title is blank.
    """
    if not resume_text or not resume_text.strip():
        raise InvalidInputException("resume_text is required")
    if not target_job_title or not target_job_title.strip():
        raise InvalidInputException("target_job_title is required")

    catalog = build_keyword_catalog(careers, target_job_title)
    found, _ = split_keywords(resume_text, catalog.relevant)
    _, missing_essential = split_keywords(resume_text, catalog.essential)

    word_count = count_words(resume_text)
    quantifiable = has_quantifiable_achievements(resume_text)
    action_verbs = uses_action_verbs(resume_text)
    formatting_consistent = is_formatting_consistent(resume_text)

    feedback = build_feedback(
        missing_essential=missing_essential,
        quantifiable=quantifiable,
        word_count=word_count,
        action_verbs=action_verbs,
        formatting_consistent=formatting_consistent,
    )

    coverage = round(100 * len(found) / max(1, len(catalog.relevant)))

    return ResumeAnalysis(
        overall_score=score_feedback(feedback),
        skill_coverage_percentage=coverage,
        feedback=feedback,
        missing_keywords=missing_essential[:MAX_MISSING_KEYWORDS],
        relevant_skills_found=found,
        analysis_summary=AnalysisSummary(
            word_count=word_count,
            has_quantifiable_achievements=quantifiable,
            uses_action_verbs=action_verbs,
            formatting_consistent=formatting_consistent,
        ),
    )
