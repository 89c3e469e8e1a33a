"""
Platform-wide statistics for the landing page.
"""
from datetime import datetime

from chai_api.core.logging import get_logger
from chai_api.repositories.campaign import CampaignRepository
from chai_api.repositories.payment import PaymentRepository
from chai_api.schemas.stats import PlatformStats
from chai_api.services.stats_aggregator import round_half_up

logger = get_logger(__name__)

RUPEES_PER_LAKH = 100_000
RUPEES_PER_TENTH_LAKH = RUPEES_PER_LAKH // 10


class PlatformStatsService:
    """Computes headline totals across every creator."""

    def __init__(
        self,
        campaigns: CampaignRepository,
        payments: PaymentRepository,
    ) -> None:
        self.campaigns = campaigns
        self.payments = payments

    async def get_stats(self, now: datetime) -> PlatformStats:
        total_raised = await self.payments.total_raised()
        creators_funded = await self.payments.count_creators_funded()
        active_campaigns = await self.campaigns.count_active(now)

        total_campaigns = await self.campaigns.count()
        funded_campaigns = await self.campaigns.count_funded()
        success_rate = (
            round_half_up(funded_campaigns / total_campaigns * 100)
            if total_campaigns > 0
            else 0
        )

        logger.debug(
            "Platform stats computed",
            total_raised=total_raised,
            total_campaigns=total_campaigns,
        )

        return PlatformStats(
            total_raised=round_half_up(total_raised / RUPEES_PER_TENTH_LAKH) / 10,
            active_campaigns=active_campaigns,
            creators_funded=creators_funded,
            success_rate=success_rate,
        )
