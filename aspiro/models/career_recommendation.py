"""
CareerRecommendation model - latest match result per (user, career).

Rows are overwritten on every recommendation run; they are a cache of the
last computed result and never an input to the next computation.
"""
import uuid
from typing import Optional

from sqlalchemy import Boolean, Float, ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from aspiro.models.base import BaseModel, JSONType


class CareerRecommendation(BaseModel):
    __tablename__ = "career_recommendations"

    __table_args__ = (
        UniqueConstraint("user_id", "career_id", name="uq_career_recommendation"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    career_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("careers.id", ondelete="CASCADE"),
        nullable=False,
    )

    match_score: Mapped[float] = mapped_column(Float, nullable=False)
    explanation: Mapped[str] = mapped_column(Text, nullable=False)

    # {required_skills, salary_range, growth_outlook} as returned to the client
    recommendation_factors: Mapped[dict] = mapped_column(JSONType, nullable=False, default=dict)

    is_current: Mapped[bool] = mapped_column(Boolean, default=True)
    user_feedback: Mapped[Optional[str]] = mapped_column(
        String(20),
        nullable=True,
    )  # 'like', 'dismiss', 'interested', 'not_relevant'

    def __repr__(self) -> str:
        return f"<CareerRecommendation user={self.user_id} career={self.career_id} score={self.match_score}>"
