# alice_api/insights/__init__.py
"""Mocked marketing insights: weekly content plan and toy revenue forecast."""

from .models import WeeklyPlan, SuggestedPost, ForecastRequest, ForecastResult, AssumedLifts

__all__ = ["WeeklyPlan", "SuggestedPost", "ForecastRequest", "ForecastResult", "AssumedLifts"]
