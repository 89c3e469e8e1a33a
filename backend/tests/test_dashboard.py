"""
Tests for dashboard and platform statistics endpoints.
"""
import pytest
from fastapi.testclient import TestClient

from chai_api.main import app
from chai_api.routers.dashboard import get_dashboard_service, get_now
from chai_api.services.dashboard_service import DashboardService
from chai_api.services.platform_stats import PlatformStatsService
from tests.conftest import (
    NOW,
    FakeCampaignRepository,
    FakePaymentRepository,
    FakeUserRepository,
)


@pytest.fixture
def seeded_client(client: TestClient, creator, campaigns, payments) -> TestClient:
    """Client whose dashboard reads from in-memory repositories at a fixed time."""
    service = DashboardService(
        FakeUserRepository([creator]),
        FakeCampaignRepository(campaigns),
        FakePaymentRepository(payments),
    )
    app.dependency_overrides[get_dashboard_service] = lambda: service
    app.dependency_overrides[get_now] = lambda: NOW
    return client


def test_dashboard_payload(seeded_client: TestClient, creator):
    """Test the full dashboard payload shape and values."""
    response = seeded_client.get("/api/dashboard", params={"user_id": str(creator.id)})

    assert response.status_code == 200
    data = response.json()
    assert set(data) >= {"stats", "chartData", "activities", "user", "campaigns", "transactions"}
    assert set(data["stats"]) == {"today", "week", "month", "all-time"}
    assert data["stats"]["today"]["earnings"] == 2000
    assert data["stats"]["today"]["earningsChange"] == 900
    assert isinstance(data["stats"]["today"]["earningsChange"], int)
    assert isinstance(data["stats"]["today"]["avgDonation"], int)
    assert data["stats"]["all-time"]["avgDonation"] == 800
    assert data["user"]["username"] == "chai_creator"
    assert data["transactions"][0]["toUser"] == "chai_creator"
    assert data["transactions"][0]["createdAt"].startswith("2024-03-15T10:30:00")
    assert isinstance(data["activities"][0]["id"], str)


def test_dashboard_stats_endpoint(seeded_client: TestClient, creator):
    """Test the stats-only endpoint."""
    response = seeded_client.get("/api/dashboard/stats", params={"user_id": str(creator.id)})

    assert response.status_code == 200
    data = response.json()
    assert data["week"]["earnings"] == 2200
    assert data["week"]["earningsChange"] == 120
    assert data["month"]["supporters"] == 3


@pytest.mark.parametrize("period,length", [("hourly", 24), ("daily", 30), ("monthly", 12)])
def test_chart_endpoint(seeded_client: TestClient, creator, period: str, length: int):
    """Test each chart resolution returns a full series."""
    response = seeded_client.get(
        "/api/dashboard/chart",
        params={"user_id": str(creator.id), "period": period},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["period"] == period
    assert len(data["data"]) == length


def test_chart_daily_total(seeded_client: TestClient, creator):
    """Test the daily chart covers all payments of the last 30 days."""
    response = seeded_client.get("/api/dashboard/chart", params={"user_id": str(creator.id)})

    assert response.json()["total"] == 3200
    assert isinstance(response.json()["total"], int)


def test_chart_invalid_period(seeded_client: TestClient, creator):
    """Test unknown periods are rejected."""
    response = seeded_client.get(
        "/api/dashboard/chart",
        params={"user_id": str(creator.id), "period": "weekly"},
    )

    assert response.status_code == 422


def test_dashboard_requires_user_id(client: TestClient):
    """Test the creator id is mandatory."""
    response = client.get("/api/dashboard")

    assert response.status_code == 422


def test_dashboard_without_database_is_empty(client: TestClient):
    """Test the dashboard still renders when the database is unavailable."""
    response = client.get("/api/dashboard", params={"user_id": "missing"})

    assert response.status_code == 200
    data = response.json()
    assert data["user"]["name"] == "User"
    assert data["stats"]["all-time"]["earnings"] == 0
    assert len(data["chartData"]["hourly"]) == 24


def test_platform_stats_without_database(client: TestClient):
    """Test platform stats fall back to zeros with a 500."""
    response = client.get("/api/stats")

    assert response.status_code == 500
    data = response.json()
    assert data["totalRaised"] == 0
    assert data["activeCampaigns"] == 0
    assert data["creatorsFunded"] == 0
    assert data["successRate"] == 0
    assert data["error"] == "Failed to fetch stats"


async def test_platform_stats_service(campaigns, payments):
    """Test platform totals from repository aggregates."""
    service = PlatformStatsService(
        FakeCampaignRepository(campaigns),
        FakePaymentRepository(payments),
    )
    # One of four campaigns reached its goal
    campaigns[1].current_amount = 60000

    stats = await service.get_stats(NOW)

    assert stats.total_raised == 0.0  # 3200 rupees is 0.032 lakh
    assert stats.active_campaigns == 2
    assert stats.creators_funded == 1
    assert stats.success_rate == 25


async def test_platform_total_raised_rounds_half_up(campaigns, payments):
    """Test lakh totals round halves up to one decimal."""
    # Eligible payments now sum to 1,25,000 rupees: exactly 1.25 lakh
    payments[0].amount = 122300
    service = PlatformStatsService(
        FakeCampaignRepository(campaigns),
        FakePaymentRepository(payments),
    )

    stats = await service.get_stats(NOW)

    assert stats.total_raised == 1.3


def test_request_id_is_echoed(client: TestClient):
    """Test the request id header round-trips."""
    response = client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["x-request-id"] == "req-123"
