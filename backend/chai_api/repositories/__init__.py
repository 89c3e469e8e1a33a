"""
Repository package for data access layer.
"""
from chai_api.repositories.base import BaseRepository
from chai_api.repositories.campaign import CampaignRepository
from chai_api.repositories.payment import PaymentRepository
from chai_api.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "CampaignRepository",
    "PaymentRepository",
]
