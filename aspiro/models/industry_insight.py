"""
IndustryInsight and UserSubscription models - market trend content.
"""
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from aspiro.models.base import BaseModel, JSONType


class IndustryInsight(BaseModel):
    """A published trend: emerging role, skill demand, industry shift or market trend."""

    __tablename__ = "industry_insights"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    summary: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    insight_type: Mapped[str] = mapped_column(
        String(30),
        nullable=False,
        index=True,
    )  # 'Emerging Role', 'Skill Demand', 'Industry Shift', 'Market Trend'

    relevant_careers: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    relevant_skills: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)

    generated_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)

    def __repr__(self) -> str:
        return f"<IndustryInsight {self.insight_type}: {self.title}>"


class UserSubscription(BaseModel):
    """A user following an industry or a skill."""

    __tablename__ = "user_subscriptions"

    __table_args__ = (
        UniqueConstraint("user_id", "subscription_type", "target", name="uq_user_subscription"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    subscription_type: Mapped[str] = mapped_column(String(20), nullable=False)  # 'industry', 'skill'
    target: Mapped[str] = mapped_column(String(100), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    def __repr__(self) -> str:
        return f"<UserSubscription {self.subscription_type}={self.target} user={self.user_id}>"
