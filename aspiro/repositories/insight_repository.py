"""
Industry insight and subscription repositories.
"""
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.models.industry_insight import IndustryInsight, UserSubscription
from aspiro.repositories.base import BaseRepository


class IndustryInsightRepository(BaseRepository[IndustryInsight]):
    def __init__(self):
        super().__init__(IndustryInsight)

    async def list_active(self, db: AsyncSession) -> List[IndustryInsight]:
        """
        Active insights, newest first.

        Membership filters on the JSON arrays run in the service, so the
        query stays the same on PostgreSQL and SQLite.
        """
        result = await db.execute(
            select(IndustryInsight)
            .where(IndustryInsight.is_active == True)
            .order_by(IndustryInsight.generated_date.desc(), IndustryInsight.title)
        )
        return list(result.scalars().all())


class UserSubscriptionRepository(BaseRepository[UserSubscription]):
    def __init__(self):
        super().__init__(UserSubscription)

    async def list_active(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> List[UserSubscription]:
        result = await db.execute(
            select(UserSubscription)
            .where(
                UserSubscription.user_id == user_id,
                UserSubscription.is_active == True,
            )
            .order_by(UserSubscription.created_at)
        )
        return list(result.scalars().all())

    async def subscribe(
        self,
        db: AsyncSession,
        *,
        user_id: UUID,
        subscription_type: str,
        target: str,
    ) -> UserSubscription:
        """Create or reactivate a subscription."""
        return await self.upsert(
            db,
            {"user_id": user_id, "subscription_type": subscription_type, "target": target},
            is_active=True,
        )
