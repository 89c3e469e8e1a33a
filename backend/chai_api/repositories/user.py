"""
User repository for data access operations.
"""
from chai_api.models.user import User
from chai_api.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model operations."""

    model = User
