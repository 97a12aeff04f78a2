"""
Resume optimisation schemas.

ResumeAnalysis doubles as the contract a model-generated analysis must
satisfy; anything that fails validation here is discarded.
"""
from typing import List, Optional

from pydantic import Field, ValidationInfo, field_validator

from aspiro.engine.proficiency import FeedbackCategory, FeedbackPriority
from aspiro.schemas.base import BaseSchema, require_text


class ResumeOptimizationRequest(BaseSchema):
    """Request body for resume-optimization."""

    resume_text: str
    target_job_title: str

    @field_validator("resume_text", "target_job_title")
    @classmethod
    def not_blank(cls, v: str, info: ValidationInfo) -> str:
        return require_text(v, info.field_name)


class FeedbackItem(BaseSchema):
    category: FeedbackCategory
    priority: FeedbackPriority
    issue: str = Field(..., min_length=1)
    suggestion: str = Field(..., min_length=1)
    examples: Optional[List[str]] = None


class AnalysisSummary(BaseSchema):
    word_count: int = Field(..., ge=0)
    has_quantifiable_achievements: bool
    uses_action_verbs: bool
    formatting_consistent: bool


class ResumeAnalysis(BaseSchema):
    overall_score: int = Field(..., ge=0, le=100)
    skill_coverage_percentage: int = Field(..., ge=0, le=100)
    feedback: List[FeedbackItem]
    missing_keywords: List[str] = Field(default_factory=list, max_length=10)
    relevant_skills_found: List[str] = Field(default_factory=list)
    analysis_summary: AnalysisSummary
