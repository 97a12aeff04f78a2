"""
Repository layer - data access abstraction.

Repositories handle all database queries, keeping SQL/ORM logic
out of the service and route layers.
"""
from aspiro.repositories.base import BaseRepository
from aspiro.repositories.user_repository import UserRepository
from aspiro.repositories.catalog_repository import (
    SkillRepository,
    CareerRepository,
    LearningResourceRepository,
)
from aspiro.repositories.recommendation_repository import (
    CareerRecommendationRepository,
    SkillGapAnalysisRepository,
)
from aspiro.repositories.insight_repository import (
    IndustryInsightRepository,
    UserSubscriptionRepository,
)

__all__ = [
    "BaseRepository",
    "UserRepository",
    "SkillRepository",
    "CareerRepository",
    "LearningResourceRepository",
    "CareerRecommendationRepository",
    "SkillGapAnalysisRepository",
    "IndustryInsightRepository",
    "UserSubscriptionRepository",
]
