"""
Skill model - the skill catalog.
"""
from typing import Optional
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from aspiro.models.base import BaseModel


class Skill(BaseModel):
    """
    Skill catalog entry.

    Reference data: created by seeding, never changed by request handlers.
    """

    __tablename__ = "skills"

    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    category: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
        index=True,
    )  # 'Technical', 'Soft', 'Tool', 'Domain'
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Skill {self.name}>"
