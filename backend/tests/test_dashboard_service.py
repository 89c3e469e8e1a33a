"""
Tests for the dashboard service fallback policy and payload assembly.
"""
from sqlalchemy.exc import OperationalError

import pytest

from chai_api.services.dashboard_service import DashboardService
from tests.conftest import (
    NOW,
    FakeCampaignRepository,
    FakePaymentRepository,
    FakeUserRepository,
)


class FailingPaymentRepository:
    async def list_eligible_for_creator(self, username):
        raise OperationalError("SELECT * FROM payments", {}, ConnectionRefusedError("refused"))


def assert_empty(dashboard):
    assert dashboard.user.name == "User"
    assert dashboard.user.username == ""
    assert dashboard.campaigns == []
    assert dashboard.transactions == []
    assert dashboard.activities == []
    assert dashboard.stats.all_time.earnings == 0
    assert dashboard.stats.today.campaigns == 0
    assert len(dashboard.chart_data.hourly) == 24
    assert len(dashboard.chart_data.daily) == 30
    assert len(dashboard.chart_data.monthly) == 12


class TestDashboardService:
    """Tests for DashboardService."""

    @pytest.fixture
    def service(self, creator, campaigns, payments) -> DashboardService:
        return DashboardService(
            FakeUserRepository([creator]),
            FakeCampaignRepository(campaigns),
            FakePaymentRepository(payments),
            activity_limit=5,
            campaign_limit=5,
            transaction_limit=10,
            currency_symbol="₹",
        )

    async def test_dashboard_stats(self, service: DashboardService, creator):
        dashboard = await service.get_dashboard(str(creator.id), NOW)
        stats = dashboard.stats

        assert stats.today.earnings == 2000
        assert stats.today.supporters == 2
        assert stats.today.avg_donation == 1000
        assert stats.today.earnings_change == 900
        assert stats.today.supporters_change == 100
        assert stats.today.avg_donation_change == 400

        assert stats.week.earnings == 2200
        assert stats.week.avg_donation == 733
        assert stats.week.earnings_change == 120

        assert stats.month.earnings == 3200
        assert stats.month.supporters == 3
        assert stats.month.earnings_change == 100

        assert stats.all_time.earnings == 3200
        assert stats.all_time.earnings_change == 0

    async def test_campaign_snapshot(self, service: DashboardService, creator):
        dashboard = await service.get_dashboard(creator.id, NOW)

        assert dashboard.stats.today.campaigns == 2
        assert dashboard.stats.all_time.campaigns == 2
        assert [c.title for c in dashboard.campaigns] == [
            "Indie Album",
            "Street Art Wall",
            "Community Library",
        ]

    async def test_activity_and_transactions(self, service: DashboardService, creator):
        dashboard = await service.get_dashboard(creator.id, NOW)

        assert len(dashboard.transactions) == 4
        assert dashboard.activities[0].message == "Someone supported your campaign with ₹1,500"
        assert dashboard.activities[1].message == "Ravi supported your campaign with ₹500"
        assert dashboard.activities[0].campaign_title == "Community Library"
        assert dashboard.user.username == creator.username
        assert dashboard.user.id == str(creator.id)

    async def test_limits_are_applied(self, creator, campaigns, payments):
        service = DashboardService(
            FakeUserRepository([creator]),
            FakeCampaignRepository(campaigns),
            FakePaymentRepository(payments),
            activity_limit=1,
            campaign_limit=2,
            transaction_limit=3,
        )

        dashboard = await service.get_dashboard(creator.id, NOW)

        assert len(dashboard.activities) == 1
        assert len(dashboard.campaigns) == 2
        assert len(dashboard.transactions) == 3
        # Limits only trim lists, never the statistics
        assert dashboard.stats.all_time.earnings == 3200

    async def test_unknown_user_gets_empty_dashboard(self, service: DashboardService):
        dashboard = await service.get_dashboard("00000000-0000-0000-0000-000000000000", NOW)

        assert_empty(dashboard)

    async def test_no_database_gets_empty_dashboard(self):
        service = DashboardService.from_session(None)

        dashboard = await service.get_dashboard("anyone", NOW)

        assert_empty(dashboard)

    async def test_query_failure_gets_empty_dashboard(self, creator, campaigns):
        service = DashboardService(
            FakeUserRepository([creator]),
            FakeCampaignRepository(campaigns),
            FailingPaymentRepository(),
        )

        dashboard = await service.get_dashboard(creator.id, NOW)

        assert_empty(dashboard)
