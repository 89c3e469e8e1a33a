"""
Platform statistics route.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from chai_api.core.database import DbSession
from chai_api.core.logging import get_logger
from chai_api.repositories.campaign import CampaignRepository
from chai_api.repositories.payment import PaymentRepository
from chai_api.schemas.stats import PlatformStats
from chai_api.services.platform_stats import PlatformStatsService

logger = get_logger(__name__)

router = APIRouter(tags=["stats"])


def _failure() -> JSONResponse:
    """500 response that still carries zeroed stats for the landing page."""
    body = PlatformStats(error="Failed to fetch stats")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(by_alias=True),
    )


@router.get("/stats", response_model=PlatformStats, response_model_exclude_none=True)
async def get_platform_stats(session: DbSession):
    """Total raised (in lakhs), active campaigns, funded creators, success rate."""
    if session is None:
        logger.warning("Platform stats requested without database")
        return _failure()

    service = PlatformStatsService(
        CampaignRepository(session),
        PaymentRepository(session),
    )
    try:
        return await service.get_stats(datetime.now(timezone.utc))
    except SQLAlchemyError as e:
        logger.error("Platform stats query failed", error=str(e))
        return _failure()
