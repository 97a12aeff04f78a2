"""
UserSkill model - skills a user has recorded on their profile.
"""
import uuid
from typing import TYPE_CHECKING, Optional
from sqlalchemy import Float, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from aspiro.engine.proficiency import ProficiencyLevel
from aspiro.models.base import BaseModel

if TYPE_CHECKING:
    from aspiro.models.skill import Skill
    from aspiro.models.user import User


class UserSkill(BaseModel):
    """
    User skill entity.

    One row per (user, skill): recording a skill again updates the row.
    """

    __tablename__ = "user_skills"

    # Unique constraint: one row per skill per user
    __table_args__ = (
        UniqueConstraint("user_id", "skill_id", name="uq_user_skill"),
    )

    # Foreign Keys
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    skill_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("skills.id"),
        nullable=False,
        index=True,
    )

    # Proficiency
    proficiency_level: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=ProficiencyLevel.BEGINNER.value,
    )  # 'Beginner', 'Intermediate', 'Advanced'
    years_experience: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="skills")
    skill: Mapped["Skill"] = relationship("Skill")

    def __repr__(self) -> str:
        return f"<UserSkill skill_id={self.skill_id} for user_id={self.user_id}>"
