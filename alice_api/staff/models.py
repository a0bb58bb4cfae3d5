# alice_api/staff/models.py
from pydantic import Field
from typing import List, Literal, Optional

from ..bookings.models import Booking
from ..core.models import ApiModel, new_id, utc_now_iso

DEFAULT_STAFF_ROLE = "staff"

OVERTIME_PENDING = "pending"
OVERTIME_APPROVED = "approved"
OVERTIME_REJECTED = "rejected"
OVERTIME_STATUSES = {OVERTIME_PENDING, OVERTIME_APPROVED, OVERTIME_REJECTED}


class StaffCreate(ApiModel):
    """Request model for registering a staff member within a business."""
    name: str = Field(min_length=1)
    national_id: str = Field(min_length=1, description="National identity number.")
    pin: str = Field(min_length=1, description="Login PIN. Never returned by the API.")
    role: Optional[str] = Field(default=None, description="Defaults to 'staff'.")


class StaffInDB(ApiModel):
    """Staff record as stored. Contains the PIN, so it is never used as a response model."""
    id: str = Field(default_factory=new_id)
    business_id: str
    name: str
    national_id: str
    pin: str
    role: str = DEFAULT_STAFF_ROLE


class StaffCreatedResponse(ApiModel):
    id: str


class AttendanceEvent(ApiModel):
    """One clock-in or clock-out. The log is append-only."""
    id: str = Field(default_factory=new_id)
    staff_id: str
    business_id: str
    type: Literal["in", "out"]
    timestamp: str = Field(default_factory=utc_now_iso)


class OvertimeRequestCreate(ApiModel):
    hours: float = Field(gt=0, allow_inf_nan=False, description="Number of overtime hours requested.")
    reason: str = ""


class OvertimeRequest(ApiModel):
    id: str = Field(default_factory=new_id)
    staff_id: str
    business_id: str
    hours: float
    reason: str = ""
    status: str = OVERTIME_PENDING


class AgendaResponse(ApiModel):
    """The logged-in staff member's non-cancelled bookings."""
    bookings: List[Booking]
