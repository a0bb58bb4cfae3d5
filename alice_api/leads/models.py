# alice_api/leads/models.py
from pydantic import Field
from typing import Optional, Union
from typing_extensions import Annotated

from ..core.models import ApiModel, new_id

# A number, or free text such as "R2000" or "around 1k"
Budget = Union[Annotated[float, Field(ge=0, allow_inf_nan=False)], str]


class LeadCreate(ApiModel):
    """Request model for capturing a sales lead."""
    name: str = Field(min_length=1)
    contact: str = Field(min_length=1)
    service: Optional[str] = None
    budget: Optional[Budget] = None
    source: Optional[str] = Field(default=None, description="Where the lead came from, e.g. 'Instagram'.")
    notes: Optional[str] = None


class Lead(ApiModel):
    """A captured lead. Write-once; there is no status field."""
    id: str = Field(default_factory=new_id)
    business_id: str
    name: str
    contact: str
    service: Optional[str] = None
    budget: Optional[Budget] = None
    source: Optional[str] = None
    notes: Optional[str] = None
