"""
Campaign repository for data access operations.
"""
from datetime import datetime
from uuid import UUID

from sqlalchemy import func, select

from chai_api.models.campaign import Campaign, CampaignStatus
from chai_api.repositories.base import BaseRepository


class CampaignRepository(BaseRepository[Campaign]):
    """Repository for Campaign model operations."""

    model = Campaign

    async def list_for_creator(self, creator_id: UUID | str) -> list[Campaign]:
        """All non-deleted campaigns of a creator, newest first."""
        stmt = (
            select(Campaign)
            .where(
                Campaign.creator_id == creator_id,
                Campaign.status != CampaignStatus.DELETED.value,
            )
            .order_by(Campaign.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_active(self, now: datetime) -> int:
        """Active campaigns that have not passed their end date."""
        stmt = select(func.count()).select_from(Campaign).where(
            Campaign.status == CampaignStatus.ACTIVE.value,
            Campaign.end_date >= now,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_funded(self) -> int:
        """Campaigns whose raised amount reached the goal."""
        stmt = select(func.count()).select_from(Campaign).where(
            Campaign.current_amount >= Campaign.goal_amount,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
