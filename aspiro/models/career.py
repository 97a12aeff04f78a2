"""
Career and CareerSkill models - careers and the skills they require.
"""
import uuid
from typing import TYPE_CHECKING, List, Optional
from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from aspiro.engine.proficiency import ProficiencyLevel
from aspiro.models.base import BaseModel

if TYPE_CHECKING:
    from aspiro.models.skill import Skill


class Career(BaseModel):
    """Career path with salary band and growth outlook."""

    __tablename__ = "careers"

    name: Mapped[str] = mapped_column(String(150), unique=True, nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    industry: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    average_salary_min: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    average_salary_max: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    growth_outlook: Mapped[Optional[str]] = mapped_column(
        String(10),
        nullable=True,
    )  # 'High', 'Medium', 'Low'

    # Requirements in display order
    requirements: Mapped[List["CareerSkill"]] = relationship(
        "CareerSkill",
        back_populates="career",
        cascade="all, delete-orphan",
        order_by="CareerSkill.position",
    )

    def __repr__(self) -> str:
        return f"<Career {self.name}>"


class CareerSkill(BaseModel):
    """
    Career skill requirement entity.

    Reference data maintained independently of any user session.
    """

    __tablename__ = "career_skills"

    # Unique constraint: one requirement per skill per career
    __table_args__ = (
        UniqueConstraint("career_id", "skill_id", name="uq_career_skill"),
    )

    # Foreign Keys
    career_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("careers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    skill_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("skills.id"),
        nullable=False,
        index=True,
    )

    # Requirements
    is_essential: Mapped[bool] = mapped_column(Boolean, default=False)  # Essential vs nice-to-have
    proficiency_level: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=ProficiencyLevel.INTERMEDIATE.value,
    )
    position: Mapped[int] = mapped_column(Integer, default=0)

    # Relationships
    career: Mapped["Career"] = relationship("Career", back_populates="requirements")
    skill: Mapped["Skill"] = relationship("Skill")

    def __repr__(self) -> str:
        return f"<CareerSkill skill_id={self.skill_id} for career_id={self.career_id}>"
