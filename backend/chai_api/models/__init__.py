"""
SQLAlchemy models package.
All models are imported here for easy access and Alembic discovery.
"""
from chai_api.models.campaign import Campaign, CampaignStatus
from chai_api.models.payment import Payment, PaymentStatus
from chai_api.models.user import User

__all__ = [
    "User",
    "Campaign",
    "CampaignStatus",
    "Payment",
    "PaymentStatus",
]
