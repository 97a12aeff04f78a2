"""
User profile and user-skill schemas.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import EmailStr, Field
from aspiro.engine.proficiency import ProficiencyLevel
from aspiro.schemas.base import BaseSchema, TimestampSchema, IDSchema


class UserUpdate(BaseSchema):
    """User update schema."""

    full_name: Optional[str] = Field(None, max_length=255)
    experience_level: Optional[str] = Field(None, max_length=50)


class UserResponse(IDSchema, TimestampSchema):
    """User response schema."""

    email: EmailStr
    full_name: Optional[str] = None
    experience_level: Optional[str] = None
    is_active: bool
    last_seen_at: Optional[datetime] = None


class UserProfileResponse(UserResponse):
    """Full user profile response."""

    skills_count: int = 0


class UserSkillUpsert(BaseSchema):
    """Record or update one skill on the current user's profile."""

    skill_id: UUID
    proficiency_level: ProficiencyLevel = ProficiencyLevel.BEGINNER
    years_experience: Optional[float] = Field(None, ge=0, le=60)


class UserSkillResponse(BaseSchema):
    skill_id: UUID
    skill_name: str
    skill_category: Optional[str] = None
    proficiency_level: ProficiencyLevel
    years_experience: Optional[float] = None
    updated_at: datetime
