"""
LearningResource model - courses and material that teach a skill.
"""
import uuid
from typing import Optional
from sqlalchemy import Float, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from aspiro.models.base import BaseModel


class LearningResource(BaseModel):
    __tablename__ = "learning_resources"

    skill_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("skills.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    resource_type: Mapped[Optional[str]] = mapped_column(
        String(30),
        nullable=True,
    )  # 'Course', 'Book', 'Tutorial', 'Certification'
    url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    provider: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    duration_hours: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    difficulty_level: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    rating: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # 0.0 to 5.0
    price_usd: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    def __repr__(self) -> str:
        return f"<LearningResource {self.title!r} skill_id={self.skill_id}>"
