# alice_api/insights/endpoints.py
import logging
from datetime import datetime, timezone
from fastapi import APIRouter
from typing import Optional

from ..auth.dependencies import TenantDep
from .generator import forecast, weekly_plan
from .models import ForecastRequest, ForecastResult, WeeklyPlan

logger = logging.getLogger(__name__)

insights_router = APIRouter(prefix="/insights", tags=["Insights"])


@insights_router.post("/weekly", response_model=WeeklyPlan)
async def weekly_plan_endpoint(business: TenantDep):
    """Canned content plan for this week, tailored to the business's industry."""
    today = datetime.now(timezone.utc).date()
    logger.info(f"Generating weekly plan for business '{business.id}' ({business.industry}).")
    return weekly_plan(business.industry, today)


@insights_router.post("/forecast", response_model=ForecastResult)
async def forecast_endpoint(business: TenantDep, forecast_request: Optional[ForecastRequest] = None):
    """Toy revenue projection. An empty or missing body uses the defaults."""
    params = forecast_request or ForecastRequest()
    return forecast(params.baseline_weekly_revenue, params.marketing_spend)
