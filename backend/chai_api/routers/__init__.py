"""
API routers package.
"""
from chai_api.routers.dashboard import router as dashboard_router
from chai_api.routers.health import router as health_router
from chai_api.routers.stats import router as stats_router

__all__ = [
    "health_router",
    "dashboard_router",
    "stats_router",
]
