"""
Services package for business logic layer.
"""
from chai_api.services.dashboard_service import DashboardService
from chai_api.services.platform_stats import PlatformStatsService
from chai_api.services.stats_aggregator import aggregate

__all__ = [
    "DashboardService",
    "PlatformStatsService",
    "aggregate",
]
