# alice_api/businesses/models.py
from pydantic import Field
from typing import Optional

from ..core.models import ApiModel, new_id


class BusinessCreate(ApiModel):
    """Request model for bootstrapping a new business (tenant)."""
    name: str = Field(min_length=1, description="Display name of the business.")
    industry: str = Field(min_length=1, description="Industry tag, e.g. 'Salon'. Used by insights.")
    timezone: Optional[str] = Field(
        default=None,
        description="IANA timezone name. Falls back to the configured default when omitted.",
    )


class Business(ApiModel):
    """A tenant record. Never updated or deleted once created."""
    id: str = Field(default_factory=new_id)
    name: str
    industry: str
    timezone: str


class BusinessCreatedResponse(ApiModel):
    business_id: str
    business: Business
