"""
Payment repository for data access operations.
"""
from sqlalchemy import func, or_, select
from sqlalchemy.orm import selectinload

from chai_api.models.payment import Payment, PaymentStatus
from chai_api.repositories.base import BaseRepository

# Completion is recorded in two fields that are not always in sync
ELIGIBLE = or_(
    Payment.done.is_(True),
    Payment.status == PaymentStatus.SUCCESS.value,
)


class PaymentRepository(BaseRepository[Payment]):
    """Repository for Payment model operations."""

    model = Payment

    async def list_eligible_for_creator(self, username: str) -> list[Payment]:
        """
        All completed payments received by a creator, newest first,
        with the campaign loaded for its title.
        """
        stmt = (
            select(Payment)
            .options(selectinload(Payment.campaign))
            .where(Payment.to_user == username, ELIGIBLE)
            .order_by(Payment.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def total_raised(self) -> float:
        """Sum of all completed payments on the platform."""
        stmt = select(func.coalesce(func.sum(Payment.amount), 0)).where(ELIGIBLE)
        result = await self.session.execute(stmt)
        return float(result.scalar() or 0)

    async def count_creators_funded(self) -> int:
        """Distinct creators who received at least one completed payment."""
        stmt = select(func.count(func.distinct(Payment.to_user))).where(ELIGIBLE)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
