"""
Resume optimisation service.

The deterministic keyword analysis always runs first. When a completion
provider is enabled it is asked for a richer analysis in the same shape;
its reply is used only if it parses and validates as a ResumeAnalysis.
Anything else (timeout, transport error, prose, out-of-range scores)
returns the deterministic result unchanged.
"""
import json

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.core.config import settings
from aspiro.core.llm import CompletionError, TextCompletionProvider, extract_json_object
from aspiro.core.logging import get_logger
from aspiro.engine.resume_keywords import analyze_resume
from aspiro.repositories.catalog_repository import CareerRepository
from aspiro.schemas.resume import ResumeAnalysis
from aspiro.services.catalog_service import to_career_profile

logger = get_logger(__name__)

RESUME_SYSTEM_PROMPT = (
    "You are an expert resume reviewer and career coach. "
    "Reply with a single JSON object and nothing else."
)

RESUME_PROMPT_TEMPLATE = """Analyze and optimize this resume for the position: {title}

Resume text:
{resume}

An automated keyword check already produced these findings:
{baseline}

Provide detailed feedback including:
1. Overall score (0-100)
2. Skill coverage percentage (0-100)
3. Specific feedback, each item with a category (Content, Formatting, Keywords
   or Achievements) and a priority (High, Medium or Low)
4. Missing keywords (at most 10)
5. Analysis summary

Format as JSON:
{{
  "overall_score": 75,
  "skill_coverage_percentage": 80,
  "feedback": [
    {{
      "category": "Content",
      "priority": "High",
      "issue": "Description of the issue",
      "suggestion": "Specific suggestion for improvement",
      "examples": ["Example 1", "Example 2"]
    }}
  ],
  "missing_keywords": ["keyword1", "keyword2"],
  "relevant_skills_found": ["skill1", "skill2"],
  "analysis_summary": {{
    "word_count": 350,
    "has_quantifiable_achievements": true,
    "uses_action_verbs": true,
    "formatting_consistent": false
  }}
}}
"""


class ResumeService:
    """Handles resume scoring for a target job title."""

    def __init__(self):
        self.career_repo = CareerRepository()

    async def optimize(
        self,
        db: AsyncSession,
        provider: TextCompletionProvider,
        *,
        resume_text: str,
        target_job_title: str,
    ) -> ResumeAnalysis:
        """
        Raises:
            InvalidInputException: If the resume text or job title is blank.
        """
        careers = await self.career_repo.list_with_requirements(db)
        baseline = analyze_resume(
            resume_text,
            target_job_title,
            [to_career_profile(career) for career in careers],
        )

        if not provider.enabled:
            return baseline

        prompt = RESUME_PROMPT_TEMPLATE.format(
            title=target_job_title,
            resume=resume_text[: settings.llm_max_resume_chars],
            baseline=json.dumps(baseline.model_dump(mode="json"), indent=2),
        )

        try:
            raw = await provider.complete(prompt, system=RESUME_SYSTEM_PROMPT, json_mode=True)
        except CompletionError as exc:
            logger.warning(
                "resume_model_failed",
                provider=provider.name,
                reason=str(exc),
                fallback="deterministic",
            )
            return baseline

        data = extract_json_object(raw)
        if data is None:
            logger.warning(
                "resume_model_unparsable",
                provider=provider.name,
                fallback="deterministic",
            )
            return baseline

        try:
            analysis = ResumeAnalysis.model_validate(data)
        except ValidationError as exc:
            logger.warning(
                "resume_model_invalid",
                provider=provider.name,
                errors=exc.error_count(),
                fallback="deterministic",
            )
            return baseline

        logger.info("resume_model_used", provider=provider.name)
        return analysis
