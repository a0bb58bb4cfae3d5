# alice_api/insights/models.py
from pydantic import Field
from typing import Dict, List, Optional, Union
from typing_extensions import Annotated

from ..core.models import ApiModel


class SuggestedPost(ApiModel):
    platform: str
    day: str
    time: str
    caption: str


class WeeklyPlan(ApiModel):
    """Canned weekly social-media content plan for a business."""
    week_of: str = Field(description="ISO date the plan was generated for.")
    industry: str
    trends: List[str]
    suggested_posts: List[SuggestedPost]
    best_times: Dict[str, List[str]]
    payday_windows: List[str]
    forecast_note: str


# Upper bound on forecast inputs, far below Decimal's 28 significant digits
MAX_FORECAST_AMOUNT = 10**15

# Integers stay integers so the response echoes the request unchanged
Amount = Union[
    Annotated[int, Field(ge=0, le=MAX_FORECAST_AMOUNT)],
    Annotated[float, Field(ge=0, le=MAX_FORECAST_AMOUNT, allow_inf_nan=False)],
]


class ForecastRequest(ApiModel):
    """Inputs to the toy revenue forecast. Both fields fall back to defaults."""
    baseline_weekly_revenue: Amount = 10000
    marketing_spend: Amount = 1500


class AssumedLifts(ApiModel):
    payday_boost: float
    trend_boost: float


class ForecastResult(ApiModel):
    baseline_weekly_revenue: Union[int, float]
    projected_weekly_revenue: int
    assumed_lifts: AssumedLifts
    marketing_spend: Union[int, float]
    estimated_roi: Optional[float] = Field(
        alias="estimatedROI",
        description="Return on marketing spend, or null when there is no spend to divide by.",
    )
    roi_note: Optional[str] = None
