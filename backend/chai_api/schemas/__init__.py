"""
Pydantic schemas package.
"""
from chai_api.schemas.dashboard import (
    Activity,
    CampaignSummary,
    ChartData,
    ChartSeriesResponse,
    DashboardData,
    DashboardResponse,
    DashboardStats,
    DashboardUser,
    PaymentRecord,
    StatPeriod,
    TimeSeriesPoint,
)
from chai_api.schemas.stats import PlatformStats

__all__ = [
    # Records
    "PaymentRecord",
    "CampaignSummary",
    "DashboardUser",
    # Dashboard
    "StatPeriod",
    "DashboardStats",
    "TimeSeriesPoint",
    "ChartData",
    "ChartSeriesResponse",
    "Activity",
    "DashboardData",
    "DashboardResponse",
    # Platform
    "PlatformStats",
]
