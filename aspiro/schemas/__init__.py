"""
Pydantic schemas for request/response validation.
"""
from aspiro.schemas.base import (
    BaseSchema,
    TimestampSchema,
    IDSchema,
)
from aspiro.schemas.auth import (
    Credentials,
    RegisterRequest,
    TokenResponse,
    RefreshTokenRequest,
)
from aspiro.schemas.user import (
    UserUpdate,
    UserResponse,
    UserProfileResponse,
    UserSkillUpsert,
    UserSkillResponse,
)
from aspiro.schemas.catalog import (
    SalaryRange,
    SkillResponse,
    CareerRequirementResponse,
    CareerSummary,
    CareerDetail,
)
from aspiro.schemas.career import (
    RequiredSkillStatus,
    MatchResult,
    RecommendationsResponse,
    CareerFeedbackRequest,
    CareerFeedbackResponse,
)
from aspiro.schemas.skill_gap import (
    SkillGapRequest,
    LearningResourceResponse,
    SkillGap,
    SkillGapSummary,
    CareerBrief,
    SkillGapAnalysisResponse,
)
from aspiro.schemas.resume import (
    ResumeOptimizationRequest,
    FeedbackItem,
    AnalysisSummary,
    ResumeAnalysis,
)
from aspiro.schemas.trends import (
    InsightResponse,
    CategorizedInsights,
    TrendingSkill,
    SubscriptionCreate,
    SubscriptionResponse,
    IndustryTrendsResponse,
)
from aspiro.schemas.chat import ChatRequest, ChatResponse

__all__ = [
    # Base
    "BaseSchema",
    "TimestampSchema",
    "IDSchema",
    # Auth
    "Credentials",
    "RegisterRequest",
    "TokenResponse",
    "RefreshTokenRequest",
    # User
    "UserUpdate",
    "UserResponse",
    "UserProfileResponse",
    "UserSkillUpsert",
    "UserSkillResponse",
    # Catalog
    "SalaryRange",
    "SkillResponse",
    "CareerRequirementResponse",
    "CareerSummary",
    "CareerDetail",
    # Recommendations
    "RequiredSkillStatus",
    "MatchResult",
    "RecommendationsResponse",
    "CareerFeedbackRequest",
    "CareerFeedbackResponse",
    # Skill gaps
    "SkillGapRequest",
    "LearningResourceResponse",
    "SkillGap",
    "SkillGapSummary",
    "CareerBrief",
    "SkillGapAnalysisResponse",
    # Resume
    "ResumeOptimizationRequest",
    "FeedbackItem",
    "AnalysisSummary",
    "ResumeAnalysis",
    # Trends
    "InsightResponse",
    "CategorizedInsights",
    "TrendingSkill",
    "SubscriptionCreate",
    "SubscriptionResponse",
    "IndustryTrendsResponse",
    # Chat
    "ChatRequest",
    "ChatResponse",
]
