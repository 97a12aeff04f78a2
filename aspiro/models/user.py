"""
User accounts and the profile fields career guidance reads.
"""
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from aspiro.models.base import BaseModel

if TYPE_CHECKING:
    from aspiro.models.user_skill import UserSkill


class User(BaseModel):
    __tablename__ = "users"

    # Stored lowercased.
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))

    full_name: Mapped[Optional[str]] = mapped_column(String(255))
    experience_level: Mapped[Optional[str]] = mapped_column(String(50))  # free text, e.g. "mid"

    # Deactivated accounts cannot sign in and their tokens stop working.
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)
    last_seen_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    skills: Mapped[List["UserSkill"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<User {self.email}>"
