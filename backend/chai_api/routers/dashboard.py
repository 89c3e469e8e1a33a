"""
Dashboard API routes for a creator's earnings statistics.
"""
from datetime import datetime
from typing import Annotated, Literal
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query

from chai_api.core.config import settings
from chai_api.core.database import DbSession
from chai_api.core.logging import get_logger
from chai_api.schemas.dashboard import (
    ChartSeriesResponse,
    DashboardResponse,
    DashboardStats,
)
from chai_api.services.dashboard_service import DashboardService
from chai_api.services.stats_aggregator import whole_amount

logger = get_logger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_service(session: DbSession) -> DashboardService:
    return DashboardService.from_session(session)


def get_now() -> datetime:
    """Current time in the dashboard's calendar timezone."""
    return datetime.now(ZoneInfo(settings.timezone))


UserId = Annotated[str, Query(description="Creator user ID")]
Service = Annotated[DashboardService, Depends(get_dashboard_service)]
Now = Annotated[datetime, Depends(get_now)]


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    user_id: UserId,
    service: Service,
    now: Now,
) -> DashboardResponse:
    """Get the complete dashboard in a single call."""
    return await service.get_dashboard(user_id, now)


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    user_id: UserId,
    service: Service,
    now: Now,
) -> DashboardStats:
    """
    Get today/week/month/all-time statistics with change versus the
    preceding period of equal length.
    """
    dashboard = await service.get_dashboard(user_id, now)
    return dashboard.stats


@router.get("/chart", response_model=ChartSeriesResponse)
async def get_earnings_chart(
    user_id: UserId,
    service: Service,
    now: Now,
    period: Literal["hourly", "daily", "monthly"] = Query("daily", description="Period: hourly, daily, monthly"),
) -> ChartSeriesResponse:
    """Get one earnings series: 24 hours, 30 days or 12 months."""
    dashboard = await service.get_dashboard(user_id, now)
    data = getattr(dashboard.chart_data, period)

    return ChartSeriesResponse(
        period=period,
        data=data,
        total=whole_amount(sum(point.amount for point in data)),
    )
