# alice_api/bookings/models.py
from pydantic import Field
from typing import Optional

from ..core.models import ApiModel, new_id

BOOKING_CONFIRMED = "confirmed"
BOOKING_CANCELLED = "cancelled"
BOOKING_STATUSES = {BOOKING_CONFIRMED, BOOKING_CANCELLED}


class BookingCreate(ApiModel):
    """Request model for a new client booking."""
    client_name: str = Field(min_length=1)
    contact: str = Field(min_length=1, description="Phone number or email of the client.")
    service: str = Field(min_length=1)
    when: str = Field(min_length=1, description="Requested date/time, as supplied by the client.")
    staff_id: Optional[str] = Field(default=None, description="Staff member assigned to the booking.")
    notes: Optional[str] = None


class Booking(ApiModel):
    id: str = Field(default_factory=new_id)
    business_id: str
    client_name: str
    contact: str
    service: str
    when: str
    staff_id: Optional[str] = None
    notes: str = ""
    status: str = BOOKING_CONFIRMED
