"""
Service layer - business logic and orchestration.

Services contain the application's business logic, coordinate between
repositories and the scoring engine, and handle cross-cutting concerns.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from aspiro.services.auth_service import AuthService
from aspiro.services.user_service import UserService
from aspiro.services.catalog_service import CatalogService
from aspiro.services.recommendation_service import RecommendationService
from aspiro.services.skill_gap_service import SkillGapService
from aspiro.services.resume_service import ResumeService
from aspiro.services.trends_service import TrendsService
from aspiro.services.chat_service import ChatService

__all__ = [
    "AuthService",
    "UserService",
    "CatalogService",
    "RecommendationService",
    "SkillGapService",
    "ResumeService",
    "TrendsService",
    "ChatService",
]
