# alice_api/auth/models.py
from pydantic import Field

from ..core.models import ApiModel


class StaffLoginRequest(ApiModel):
    """Credentials a staff member presents to log in to their business."""
    name: str
    national_id: str
    pin: str


class StaffPublic(ApiModel):
    """Staff fields safe to return to clients."""
    id: str
    name: str
    role: str


class StaffSessionResponse(ApiModel):
    token: str = Field(description="Signed session token. Send as 'Authorization: Bearer <token>'.")
    staff: StaffPublic


class SessionClaims(ApiModel):
    """Identity carried by a verified session token."""
    staff_id: str
    business_id: str
    role: str
