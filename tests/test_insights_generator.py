from datetime import date

import pytest

from alice_api.insights.generator import ZERO_SPEND_ROI_NOTE, forecast, weekly_plan
from alice_api.insights.models import MAX_FORECAST_AMOUNT


def test_forecast_defaults():
    result = forecast()

    assert result.projected_weekly_revenue == 11700
    assert result.estimated_roi == 0.13
    assert result.assumed_lifts.payday_boost == 0.12
    assert result.assumed_lifts.trend_boost == 0.05
    assert result.roi_note is None


def test_forecast_rounds_projection_half_up():
    # 1010 * 1.17 = 1181.7
    assert forecast(1010, 100).projected_weekly_revenue == 1182
    # 50 * 1.17 = 58.5
    assert forecast(50, 1).projected_weekly_revenue == 59


def test_forecast_negative_roi_when_spend_exceeds_lift():
    result = forecast(1000, 500)

    assert result.projected_weekly_revenue == 1170
    assert result.estimated_roi == -0.66


def test_forecast_zero_spend_has_no_roi():
    result = forecast(10000, 0)

    assert result.projected_weekly_revenue == 11700
    assert result.estimated_roi is None
    assert result.roi_note == ZERO_SPEND_ROI_NOTE


def test_forecast_serializes_roi_with_capitalized_alias():
    payload = forecast().model_dump(by_alias=True)

    assert payload["estimatedROI"] == 0.13
    assert payload["projectedWeeklyRevenue"] == 11700
    assert payload["assumedLifts"] == {"paydayBoost": 0.12, "trendBoost": 0.05}


def test_weekly_plan_uses_industry_and_date():
    plan = weekly_plan("Hair Salon", date(2024, 3, 14))

    assert plan.week_of == "2024-03-14"
    assert plan.industry == "Hair Salon"
    assert [post.platform for post in plan.suggested_posts] == ["Instagram", "TikTok", "Facebook"]
    assert plan.suggested_posts[0].caption.endswith("#HairSalon")
    assert "#HairSalonTips" in plan.suggested_posts[1].caption
    assert plan.best_times == {"Instagram": ["18:00"], "TikTok": ["11:00"], "Facebook": ["12:30"]}
    assert plan.payday_windows == ["15th", "25th–30th"]
    assert len(plan.trends) == 3


def test_weekly_plan_is_deterministic():
    today = date(2024, 1, 1)
    assert weekly_plan("Salon", today) == weekly_plan("Salon", today)


@pytest.mark.parametrize("baseline, spend", [(1e30, 1500), (float("inf"), 1500), (10000, float("nan")), (-1, 1500)])
def test_forecast_rejects_amounts_outside_range(baseline, spend):
    with pytest.raises(ValueError):
        forecast(baseline, spend)


def test_forecast_handles_largest_accepted_amount():
    result = forecast(MAX_FORECAST_AMOUNT, 0.01)

    assert result.projected_weekly_revenue == 1_170_000_000_000_000
    assert result.estimated_roi is not None


def test_forecast_spend_below_one_cent_counts_as_zero():
    result = forecast(10000, 1e-300)

    assert result.estimated_roi is None
    assert result.roi_note == ZERO_SPEND_ROI_NOTE


def test_forecast_echoes_integer_inputs_unchanged():
    payload = forecast(10000, 1500).model_dump(mode="json", by_alias=True)

    assert payload["baselineWeeklyRevenue"] == 10000
    assert isinstance(payload["baselineWeeklyRevenue"], int)
    assert isinstance(payload["marketingSpend"], int)
