# alice_api/staff/service.py
import logging
from typing import List, Literal, Optional

from ..auth.models import SessionClaims
from ..bookings.models import BOOKING_CANCELLED, Booking
from ..storage.interfaces import (
    AbstractAttendanceStore,
    AbstractBookingStore,
    AbstractOvertimeStore,
    AbstractStaffStore,
)
from .models import (
    DEFAULT_STAFF_ROLE,
    OVERTIME_STATUSES,
    AttendanceEvent,
    OvertimeRequest,
    OvertimeRequestCreate,
    StaffCreate,
    StaffInDB,
)

logger = logging.getLogger(__name__)


class StaffService:
    """
    Staff records plus everything a logged-in staff member does for themselves:
    agenda, clocking in/out and overtime requests.
    """

    def __init__(
        self,
        staff_store: AbstractStaffStore,
        booking_store: AbstractBookingStore,
        attendance_store: AbstractAttendanceStore,
        overtime_store: AbstractOvertimeStore,
    ):
        self.staff_store = staff_store
        self.booking_store = booking_store
        self.attendance_store = attendance_store
        self.overtime_store = overtime_store

    async def create_staff(self, business_id: str, staff_create: StaffCreate) -> StaffInDB:
        """
        Register a staff member. Duplicate (name, national ID, PIN) triples are
        accepted; login then matches the earliest one.
        """
        staff = StaffInDB(
            business_id=business_id,
            name=staff_create.name,
            national_id=staff_create.national_id,
            pin=staff_create.pin,
            role=staff_create.role or DEFAULT_STAFF_ROLE,
        )
        logger.info(f"Service: Creating staff '{staff.id}' (role '{staff.role}') in business '{business_id}'.")
        return await self.staff_store.add_staff(staff)

    async def get_agenda(self, session: SessionClaims) -> List[Booking]:
        """Bookings assigned to the session's staff member, excluding cancelled ones."""
        return await self.booking_store.list_bookings(
            session.business_id,
            staff_id=session.staff_id,
            exclude_status=BOOKING_CANCELLED,
        )

    async def record_attendance(self, session: SessionClaims, event_type: Literal["in", "out"]) -> AttendanceEvent:
        """Append a clock-in or clock-out event. No in/out alternation is enforced."""
        event = AttendanceEvent(staff_id=session.staff_id, business_id=session.business_id, type=event_type)
        logger.info(f"Service: Staff '{session.staff_id}' clocked {event_type} at {event.timestamp}.")
        return await self.attendance_store.add_event(event)

    async def request_overtime(self, session: SessionClaims, overtime_create: OvertimeRequestCreate) -> OvertimeRequest:
        request = OvertimeRequest(
            staff_id=session.staff_id,
            business_id=session.business_id,
            hours=overtime_create.hours,
            reason=overtime_create.reason,
        )
        logger.info(f"Service: Staff '{session.staff_id}' requested {request.hours}h overtime.")
        return await self.overtime_store.add_request(request)

    async def set_overtime_status(self, business_id: str, request_id: str, status: str) -> Optional[OvertimeRequest]:
        """
        Approve or reject an overtime request.

        Returns None if the request does not exist in that business.

        Raises:
            ValueError: if the status is not a known overtime status
        """
        if status not in OVERTIME_STATUSES:
            raise ValueError(f"Unknown overtime status '{status}'.")
        logger.info(f"Service: Setting overtime request '{request_id}' of business '{business_id}' to '{status}'.")
        return await self.overtime_store.update_request_status(business_id, request_id, status)
