"""
Core package containing configuration, database, and logging.
"""
from chai_api.core.config import settings
from chai_api.core.database import Base, DbSession, get_db_session
from chai_api.core.logging import configure_logging, get_logger

__all__ = [
    "settings",
    "Base",
    "DbSession",
    "get_db_session",
    "configure_logging",
    "get_logger",
]
