"""
Database models for Aspiro.

Importing this package registers every table on Base.metadata.
"""
from aspiro.models.base import BaseModel
from aspiro.models.user import User
from aspiro.models.skill import Skill
from aspiro.models.user_skill import UserSkill
from aspiro.models.career import Career, CareerSkill
from aspiro.models.learning_resource import LearningResource
from aspiro.models.career_recommendation import CareerRecommendation
from aspiro.models.skill_gap_analysis import SkillGapAnalysis
from aspiro.models.industry_insight import IndustryInsight, UserSubscription

__all__ = [
    "BaseModel",
    "User",
    "Skill",
    "UserSkill",
    "Career",
    "CareerSkill",
    "LearningResource",
    "CareerRecommendation",
    "SkillGapAnalysis",
    "IndustryInsight",
    "UserSubscription",
]
