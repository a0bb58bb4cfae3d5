# alice_api/insights/generator.py
"""
Mocked insights: a canned weekly content plan and a toy revenue forecast.

Both functions are pure. Nothing here reads or writes stores; the endpoints
supply the business's industry and the current date.
"""
import re
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from .models import MAX_FORECAST_AMOUNT, AssumedLifts, ForecastResult, SuggestedPost, WeeklyPlan

DEFAULT_BASELINE_WEEKLY_REVENUE = 10000
DEFAULT_MARKETING_SPEND = 1500

PAYDAY_BOOST = Decimal("0.12")
TREND_BOOST = Decimal("0.05")

PAYDAY_WINDOWS = ["15th", "25th–30th"]
WEEKLY_TRENDS = [
    "Payday promos drive spikes",
    "Short-form video (15–30s) outperforms",
    "UGC + before/after posts convert",
]
FORECAST_NOTE = "Assuming 8% CTR uplift during payday window."
ZERO_SPEND_ROI_NOTE = "ROI is undefined when marketingSpend is 0."


def _hashtag(industry: str) -> str:
    return re.sub(r"\s+", "", industry)


def weekly_plan(industry: str, today: date) -> WeeklyPlan:
    """Build the weekly content plan for a business in the given industry."""
    tag = _hashtag(industry)
    posts = [
        SuggestedPost(
            platform="Instagram", day="Thu", time="18:00",
            caption=f"Payday glow-up ✨ Book now & save 10%. #PaydaySpecial #{tag}",
        ),
        SuggestedPost(
            platform="TikTok", day="Sat", time="11:00",
            caption=f"Behind the scenes + quick tips 🎥 #{tag}Tips",
        ),
        SuggestedPost(
            platform="Facebook", day="Tue", time="12:30",
            caption="Client story + referral rewards 💬 #HappyClients",
        ),
    ]
    return WeeklyPlan(
        week_of=today.isoformat(),
        industry=industry,
        trends=list(WEEKLY_TRENDS),
        suggested_posts=posts,
        best_times={post.platform: [post.time] for post in posts},
        payday_windows=list(PAYDAY_WINDOWS),
        forecast_note=FORECAST_NOTE,
    )


def _round_half_up(value: Decimal, places: str = "1") -> Decimal:
    return value.quantize(Decimal(places), rounding=ROUND_HALF_UP)


def _amount(name: str, value: float) -> Decimal:
    """Money amount as a Decimal, to the cent."""
    # Decimal(str(0.1)) == Decimal("0.1")
    amount = Decimal(str(value))
    if not amount.is_finite() or amount < 0 or amount > MAX_FORECAST_AMOUNT:
        raise ValueError(f"{name} must be between 0 and {MAX_FORECAST_AMOUNT}, got {value}.")
    return _round_half_up(amount, "0.01")


def forecast(
    baseline_weekly_revenue: float = DEFAULT_BASELINE_WEEKLY_REVENUE,
    marketing_spend: float = DEFAULT_MARKETING_SPEND,
) -> ForecastResult:
    """
    Project weekly revenue with fixed payday and trend lifts.

    projected = round(baseline * (1 + payday + trend))
    roi = ((projected - baseline) - spend) / spend, rounded to 2 places

    A marketing spend below one cent counts as zero and yields
    ``estimated_roi=None`` with an explanatory ``roi_note``.

    Raises:
        ValueError: if an amount is negative, not finite or above MAX_FORECAST_AMOUNT
    """
    baseline = _amount("baseline_weekly_revenue", baseline_weekly_revenue)
    spend = _amount("marketing_spend", marketing_spend)

    projected = _round_half_up(baseline * (1 + PAYDAY_BOOST + TREND_BOOST))

    roi: Optional[float] = None
    roi_note: Optional[str] = None
    if spend == 0:
        roi_note = ZERO_SPEND_ROI_NOTE
    else:
        roi = float(_round_half_up(((projected - baseline) - spend) / spend, "0.01"))

    return ForecastResult(
        baseline_weekly_revenue=baseline_weekly_revenue,
        projected_weekly_revenue=int(projected),
        assumed_lifts=AssumedLifts(payday_boost=float(PAYDAY_BOOST), trend_boost=float(TREND_BOOST)),
        marketing_spend=marketing_spend,
        estimated_roi=roi,
        roi_note=roi_note,
    )
