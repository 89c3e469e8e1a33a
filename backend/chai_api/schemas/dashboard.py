"""
Dashboard Pydantic schemas: input records handed to the aggregator and the
serializable payload returned to the dashboard.
"""
from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PaymentRecord(BaseModel):
    """A payment as seen by the aggregator (read-only snapshot)."""

    id: str
    amount: float
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    to_user: str = Field("", alias="toUser")
    done: bool = False
    status: Optional[str] = None
    user_id: Optional[str] = Field(None, alias="userId")
    email: Optional[str] = None
    name: Optional[str] = None
    campaign_id: Optional[str] = Field(None, alias="campaignId")
    campaign_title: Optional[str] = Field(None, alias="campaignTitle")
    anonymous: bool = False
    message: Optional[str] = None
    currency: str = "INR"

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    @field_validator("id", "user_id", "campaign_id", mode="before")
    @classmethod
    def _stringify_ids(cls, value):
        # Database ids (UUIDs) leave the core as plain strings
        return str(value) if value is not None else None


class CampaignSummary(BaseModel):
    """A creator's campaign as listed on the dashboard."""

    id: str
    creator_id: Optional[str] = Field(None, alias="creatorId")
    title: str
    slug: Optional[str] = None
    status: str
    goal_amount: float = Field(0, alias="goalAmount")
    current_amount: float = Field(0, alias="currentAmount")
    end_date: Optional[datetime] = Field(None, alias="endDate")
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    @field_validator("id", "creator_id", mode="before")
    @classmethod
    def _stringify_ids(cls, value):
        return str(value) if value is not None else None


class DashboardUser(BaseModel):
    """Public profile of the creator owning the dashboard."""

    id: Optional[str] = None
    name: Optional[str] = "User"
    username: str = ""
    email: str = ""
    profilepic: Optional[str] = ""

    model_config = ConfigDict(from_attributes=True)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return str(value) if value is not None else None


class StatPeriod(BaseModel):
    """Statistics for one window plus change versus the preceding window."""

    earnings: Union[int, float] = 0
    supporters: int = 0
    campaigns: int = 0
    avg_donation: Union[int, float] = Field(0, alias="avgDonation")
    earnings_change: Union[int, float] = Field(0, alias="earningsChange")
    supporters_change: Union[int, float] = Field(0, alias="supportersChange")
    campaigns_change: Union[int, float] = Field(0, alias="campaignsChange")
    avg_donation_change: Union[int, float] = Field(0, alias="avgDonationChange")

    model_config = ConfigDict(populate_by_name=True)


class DashboardStats(BaseModel):
    """The four dashboard windows."""

    today: StatPeriod
    week: StatPeriod
    month: StatPeriod
    all_time: StatPeriod = Field(alias="all-time")

    model_config = ConfigDict(populate_by_name=True)


class TimeSeriesPoint(BaseModel):
    """One chart bucket."""

    label: str
    amount: Union[int, float] = 0


class ChartData(BaseModel):
    """Earnings series at three resolutions."""

    hourly: list[TimeSeriesPoint]
    daily: list[TimeSeriesPoint]
    monthly: list[TimeSeriesPoint]


class Activity(BaseModel):
    """A recent-activity entry derived from a payment."""

    id: str
    type: str = "new_supporter"
    message: str
    campaign_title: Optional[str] = Field(None, alias="campaignTitle")
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)


class DashboardData(BaseModel):
    """Aggregated statistics, charts and activity for one creator."""

    stats: DashboardStats
    chart_data: ChartData = Field(alias="chartData")
    activities: list[Activity]

    model_config = ConfigDict(populate_by_name=True)


class DashboardResponse(DashboardData):
    """Complete dashboard payload in a single call."""

    user: DashboardUser
    campaigns: list[CampaignSummary]
    transactions: list[PaymentRecord]


class ChartSeriesResponse(BaseModel):
    """A single chart series for the requested resolution."""

    period: str
    data: list[TimeSeriesPoint]
    total: Union[int, float] = 0
