"""
Dashboard statistics and time-series aggregation.

Everything in this module is a pure function of its inputs: the creator's
payment records, their campaigns and the reference time ``now``. Nothing is
cached or persisted; the dashboard recomputes on every request.

Windows (today / week / month) are anchored to local midnight of ``now`` and
step back by fixed 24 hour multiples, while the monthly chart uses real
calendar months. Both behaviors are relied upon by the dashboard charts.
"""
import math
from datetime import datetime, timedelta, timezone
from typing import Iterable, NamedTuple, Optional, Sequence, Union
from zoneinfo import ZoneInfo

from chai_api.core.config import settings
from chai_api.models.campaign import CampaignStatus
from chai_api.models.payment import PaymentStatus
from chai_api.schemas.dashboard import (
    Activity,
    CampaignSummary,
    ChartData,
    DashboardData,
    DashboardStats,
    PaymentRecord,
    StatPeriod,
    TimeSeriesPoint,
)

HOUR = timedelta(hours=1)
DAY = timedelta(days=1)

HOURLY_BUCKETS = 24
DAILY_BUCKETS = 30
MONTHLY_BUCKETS = 12

UNKNOWN_SUPPORTER = "unknown"

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class WindowBoundaries(NamedTuple):
    """Start instants of the dashboard windows and their predecessors."""

    today: datetime
    yesterday: datetime
    week_ago: datetime
    prev_week_start: datetime
    month_ago: datetime
    prev_month_start: datetime


def _shift(moment: datetime, delta: timedelta) -> datetime:
    """Move by a fixed length of time (absolute, not wall-clock)."""
    if moment.tzinfo is None:
        return moment + delta
    return (moment.astimezone(timezone.utc) + delta).astimezone(moment.tzinfo)


def _align(moment: Optional[datetime], reference: datetime) -> Optional[datetime]:
    """Make ``moment`` comparable with ``reference``.

    Naive timestamps are taken to be in the reference's timezone; aware
    timestamps compared against a naive reference are converted to the
    configured timezone and made naive.
    """
    if moment is None:
        return None
    if reference.tzinfo is None:
        if moment.tzinfo is None:
            return moment
        return moment.astimezone(ZoneInfo(settings.timezone)).replace(tzinfo=None)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=reference.tzinfo)
    return moment


def round_half_up(value: float) -> Union[int, float]:
    """Round to the nearest integer with halves going up (-2.5 -> -2).

    NaN and infinities are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def whole_amount(value: float) -> Union[int, float]:
    """Return whole-rupee amounts as ints (1500.0 -> 1500); others unchanged."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def local_midnight(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def compute_window_boundaries(now: datetime) -> WindowBoundaries:
    """Compute window starts by fixed-day subtraction from local midnight."""
    today = local_midnight(now)
    week_ago = _shift(today, -7 * DAY)
    month_ago = _shift(today, -30 * DAY)
    return WindowBoundaries(
        today=today,
        yesterday=_shift(today, -DAY),
        week_ago=week_ago,
        prev_week_start=_shift(week_ago, -7 * DAY),
        month_ago=month_ago,
        prev_month_start=_shift(month_ago, -30 * DAY),
    )


def is_eligible(payment: PaymentRecord) -> bool:
    """A payment counts once either completion field says so."""
    return payment.done is True or payment.status == PaymentStatus.SUCCESS.value


def filter_by_window(
    payments: Iterable[PaymentRecord],
    start: datetime,
    end: Optional[datetime] = None,
) -> list[PaymentRecord]:
    """Return payments with ``start <= created_at < end`` (no end if None).

    Payments without a timestamp never fall inside a window.
    """
    selected = []
    for payment in payments:
        created_at = _align(payment.created_at, start)
        if created_at is None or created_at < start:
            continue
        if end is not None and created_at >= end:
            continue
        selected.append(payment)
    return selected


def supporter_identity(payment: PaymentRecord) -> str:
    """Identify a supporter by user id, then email, then name."""
    return payment.user_id or payment.email or payment.name or UNKNOWN_SUPPORTER


def compute_period_stats(
    payments: Sequence[PaymentRecord],
    active_campaigns: int = 0,
) -> StatPeriod:
    """Earnings, distinct supporters and average donation for one window.

    ``active_campaigns`` is reported as-is; it is a current snapshot shared
    by every window rather than something derived from the payments.
    """
    earnings = whole_amount(sum(payment.amount for payment in payments))
    supporters = {supporter_identity(payment) for payment in payments}
    avg_donation = round_half_up(earnings / len(payments)) if payments else 0

    return StatPeriod(
        earnings=earnings,
        supporters=len(supporters),
        campaigns=active_campaigns,
        avg_donation=avg_donation,
    )


def percent_change(current: float, previous: float) -> Union[int, float]:
    """Signed integer percentage change; +100 for activity from nothing."""
    if previous == 0:
        return 100 if current > 0 else 0
    return round_half_up((current - previous) / previous * 100)


def _with_changes(current: StatPeriod, previous: StatPeriod) -> StatPeriod:
    return StatPeriod.model_validate(
        {
            **current.model_dump(),
            "earnings_change": percent_change(current.earnings, previous.earnings),
            "supporters_change": percent_change(current.supporters, previous.supporters),
            "campaigns_change": percent_change(current.campaigns, previous.campaigns),
            "avg_donation_change": percent_change(current.avg_donation, previous.avg_donation),
        }
    )


def count_active_campaigns(campaigns: Iterable[CampaignSummary]) -> int:
    return sum(1 for campaign in campaigns if campaign.status == CampaignStatus.ACTIVE.value)


def compute_dashboard_stats(
    payments: Sequence[PaymentRecord],
    campaigns: Sequence[CampaignSummary],
    now: datetime,
) -> DashboardStats:
    """Stats for today, week, month and all-time from one payment list.

    Each window is compared with the equal-length window right before it;
    all-time has nothing to compare against and reports zero change.
    """
    bounds = compute_window_boundaries(now)
    active = count_active_campaigns(campaigns)

    def window(start: datetime, end: Optional[datetime] = None) -> StatPeriod:
        return compute_period_stats(filter_by_window(payments, start, end), active)

    return DashboardStats(
        today=_with_changes(window(bounds.today), window(bounds.yesterday, bounds.today)),
        week=_with_changes(window(bounds.week_ago), window(bounds.prev_week_start, bounds.week_ago)),
        month=_with_changes(window(bounds.month_ago), window(bounds.prev_month_start, bounds.month_ago)),
        all_time=compute_period_stats(payments, active),
    )


def _bucket(
    payments: Sequence[PaymentRecord],
    label: str,
    start: datetime,
    end: datetime,
) -> TimeSeriesPoint:
    amount = whole_amount(sum(payment.amount for payment in filter_by_window(payments, start, end)))
    return TimeSeriesPoint(label=label, amount=amount)


def build_hourly_series(payments: Sequence[PaymentRecord], today: datetime) -> list[TimeSeriesPoint]:
    """24 hourly buckets starting at ``today`` (local midnight)."""
    return [
        _bucket(payments, f"{hour:02d}:00", _shift(today, hour * HOUR), _shift(today, (hour + 1) * HOUR))
        for hour in range(HOURLY_BUCKETS)
    ]


def build_daily_series(payments: Sequence[PaymentRecord], today: datetime) -> list[TimeSeriesPoint]:
    """30 daily buckets ending with today, oldest first."""
    points = []
    for offset in range(DAILY_BUCKETS - 1, -1, -1):
        start = _shift(today, -offset * DAY)
        label = f"{MONTH_LABELS[start.month - 1]} {start.day}"
        points.append(_bucket(payments, label, start, _shift(start, DAY)))
    return points


def _month_start(month_index: int, tzinfo) -> datetime:
    """First instant of a month given as an absolute index (year * 12 + month - 1)."""
    year, month = divmod(month_index, 12)
    return datetime(year, month + 1, 1, tzinfo=tzinfo)


def build_monthly_series(payments: Sequence[PaymentRecord], now: datetime) -> list[TimeSeriesPoint]:
    """12 calendar-month buckets ending with the current month."""
    current = now.year * 12 + now.month - 1
    points = []
    for index in range(current - MONTHLY_BUCKETS + 1, current + 1):
        start = _month_start(index, now.tzinfo)
        end = _month_start(index + 1, now.tzinfo)
        label = f"{MONTH_LABELS[start.month - 1]} '{start.year % 100:02d}"
        points.append(_bucket(payments, label, start, end))
    return points


def format_inr(amount: float) -> str:
    """Format an amount with Indian digit grouping (12,34,567.5)."""
    if math.isnan(amount):
        return "NaN"
    if math.isinf(amount):
        return "-∞" if amount < 0 else "∞"

    sign = "-" if amount < 0 else ""
    whole, _, fraction = f"{abs(amount):.3f}".partition(".")
    fraction = fraction.rstrip("0")

    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join([*groups, tail])

    return f"{sign}{whole}.{fraction}" if fraction else f"{sign}{whole}"


def build_recent_activity(
    payments: Sequence[PaymentRecord],
    limit: int = 5,
    currency_symbol: str = "₹",
) -> list[Activity]:
    """Describe the first ``limit`` payments.

    Payments must already be ordered newest first; no sorting happens here.
    """
    activities = []
    for payment in payments[:limit]:
        supporter = "Someone" if payment.anonymous else (payment.name or "Someone")
        activities.append(
            Activity(
                id=payment.id,
                message=(
                    f"{supporter} supported your campaign with "
                    f"{currency_symbol}{format_inr(payment.amount)}"
                ),
                campaign_title=payment.campaign_title,
                created_at=payment.created_at,
            )
        )
    return activities


def aggregate(
    payments: Sequence[PaymentRecord],
    campaigns: Sequence[CampaignSummary],
    now: datetime,
    activity_limit: int = 5,
    currency_symbol: str = "₹",
) -> DashboardData:
    """Build the dashboard statistics, charts and activity feed.

    Ineligible payments are dropped first. Empty inputs produce all-zero
    statistics and zero-filled series.
    """
    eligible = [payment for payment in payments if is_eligible(payment)]
    today = local_midnight(now)

    return DashboardData(
        stats=compute_dashboard_stats(eligible, campaigns, now),
        chart_data=ChartData(
            hourly=build_hourly_series(eligible, today),
            daily=build_daily_series(eligible, today),
            monthly=build_monthly_series(eligible, now),
        ),
        activities=build_recent_activity(eligible, activity_limit, currency_symbol),
    )
