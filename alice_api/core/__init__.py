# alice_api/core/__init__.py
"""Shared building blocks used by every domain package."""

from .models import ApiModel, OkResponse, new_id, utc_now_iso

__all__ = ["ApiModel", "OkResponse", "new_id", "utc_now_iso"]
