"""
SkillGapAnalysis model - latest gap analysis per (user, career).
"""
import uuid

from sqlalchemy import Boolean, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from aspiro.models.base import BaseModel, JSONType


class SkillGapAnalysis(BaseModel):
    __tablename__ = "skill_gap_analyses"

    __table_args__ = (
        UniqueConstraint("user_id", "career_id", name="uq_skill_gap_analysis"),
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

    skill_gaps: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    # [{skill_id, resources: [...top 3]}]
    recommended_resources: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)

    is_current: Mapped[bool] = mapped_column(Boolean, default=True)

    def __repr__(self) -> str:
        return f"<SkillGapAnalysis user={self.user_id} career={self.career_id}>"
