"""
Dashboard service - loads a creator's records and runs the aggregator.

The dashboard must always render, so every upstream problem (unknown user,
database down, query failure) turns into the empty dashboard payload rather
than an error response.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chai_api.core.config import settings
from chai_api.core.logging import get_logger
from chai_api.repositories.campaign import CampaignRepository
from chai_api.repositories.payment import PaymentRepository
from chai_api.repositories.user import UserRepository
from chai_api.schemas.dashboard import (
    CampaignSummary,
    DashboardData,
    DashboardResponse,
    DashboardUser,
    PaymentRecord,
)
from chai_api.services.stats_aggregator import aggregate

logger = get_logger(__name__)


class DashboardService:
    """Builds dashboard payloads from one read of the creator's data."""

    def __init__(
        self,
        users: Optional[UserRepository],
        campaigns: Optional[CampaignRepository],
        payments: Optional[PaymentRepository],
        *,
        activity_limit: int = settings.recent_activity_limit,
        campaign_limit: int = settings.dashboard_campaign_limit,
        transaction_limit: int = settings.dashboard_transaction_limit,
        currency_symbol: str = settings.currency_symbol,
    ) -> None:
        self.users = users
        self.campaigns = campaigns
        self.payments = payments
        self.activity_limit = activity_limit
        self.campaign_limit = campaign_limit
        self.transaction_limit = transaction_limit
        self.currency_symbol = currency_symbol

    @classmethod
    def from_session(cls, session: Optional[AsyncSession]) -> "DashboardService":
        """Wire repositories to a session; no session means no database."""
        if session is None:
            return cls(None, None, None)
        return cls(
            UserRepository(session),
            CampaignRepository(session),
            PaymentRepository(session),
        )

    def _aggregate(
        self,
        payments: list[PaymentRecord],
        campaigns: list[CampaignSummary],
        now: datetime,
    ) -> DashboardData:
        return aggregate(
            payments,
            campaigns,
            now,
            activity_limit=self.activity_limit,
            currency_symbol=self.currency_symbol,
        )

    def empty_dashboard(self, now: datetime) -> DashboardResponse:
        """All-zero dashboard with zero-filled charts and a placeholder user."""
        data = self._aggregate([], [], now)
        return DashboardResponse(
            stats=data.stats,
            chart_data=data.chart_data,
            activities=data.activities,
            user=DashboardUser(),
            campaigns=[],
            transactions=[],
        )

    async def get_dashboard(self, user_id: UUID | str, now: datetime) -> DashboardResponse:
        """
        Full dashboard for a creator.

        Reads the creator, their non-deleted campaigns and all completed
        payments (newest first) once, then aggregates in memory.
        """
        if self.users is None or self.campaigns is None or self.payments is None:
            logger.warning("Database unavailable, serving empty dashboard", user_id=str(user_id))
            return self.empty_dashboard(now)

        try:
            user = await self.users.get_by_id(user_id)
            if user is None:
                logger.warning("Dashboard user not found", user_id=str(user_id))
                return self.empty_dashboard(now)

            campaigns = [
                CampaignSummary.model_validate(campaign)
                for campaign in await self.campaigns.list_for_creator(user.id)
            ]
            payments = [
                PaymentRecord.model_validate(payment)
                for payment in await self.payments.list_eligible_for_creator(user.username)
            ]
            profile = DashboardUser.model_validate(user)
        except (SQLAlchemyError, ValidationError) as e:
            logger.error(
                "Dashboard data load failed, serving empty dashboard",
                user_id=str(user_id),
                error=str(e),
            )
            return self.empty_dashboard(now)

        data = self._aggregate(payments, campaigns, now)

        logger.info(
            "Dashboard computed",
            user_id=str(user_id),
            payments=len(payments),
            campaigns=len(campaigns),
        )

        return DashboardResponse(
            stats=data.stats,
            chart_data=data.chart_data,
            activities=data.activities,
            user=profile,
            campaigns=campaigns[: self.campaign_limit],
            transactions=payments[: self.transaction_limit],
        )
