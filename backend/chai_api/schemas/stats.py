"""
Platform-wide statistics schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PlatformStats(BaseModel):
    """Headline numbers shown on the landing page."""

    total_raised: float = Field(0, alias="totalRaised")  # in lakhs
    active_campaigns: int = Field(0, alias="activeCampaigns")
    creators_funded: int = Field(0, alias="creatorsFunded")
    success_rate: int = Field(0, alias="successRate")
    error: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)
