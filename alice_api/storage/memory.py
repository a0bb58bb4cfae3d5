# alice_api/storage/memory.py
"""
In-memory store backend.

All stores of one application share a single ``InMemoryDatabase`` so that
multi-collection writes (business + seeded FAQs) land together. State lives
only as long as the process.
"""
import logging
from typing import Dict, List, Optional

from ..businesses.models import Business
from ..bookings.models import Booking
from ..faqs.models import FAQItem
from ..leads.models import Lead
from ..staff.models import AttendanceEvent, OvertimeRequest, StaffInDB
from .interfaces import (
    AbstractAttendanceStore,
    AbstractBookingStore,
    AbstractBusinessStore,
    AbstractFAQStore,
    AbstractLeadStore,
    AbstractOvertimeStore,
    AbstractStaffStore,
)

logger = logging.getLogger(__name__)


class InMemoryDatabase:
    """Process-local collections backing the in-memory stores."""

    def __init__(self):
        self.businesses: Dict[str, Business] = {}
        self.staff: List[StaffInDB] = []
        self.bookings: List[Booking] = []
        self.leads: List[Lead] = []
        self.attendance: List[AttendanceEvent] = []
        self.overtime: List[OvertimeRequest] = []
        self.faqs: Dict[str, List[FAQItem]] = {}


class _InMemoryStore:
    """Shared lifecycle for in-memory stores. Nothing to open or close."""

    def __init__(self, db: InMemoryDatabase):
        self.db = db

    async def initialize(self) -> None:
        logger.debug(f"{type(self).__name__} initialized.")

    async def teardown(self) -> None:
        logger.debug(f"{type(self).__name__} teardown (nothing to release).")


class InMemoryBusinessStore(_InMemoryStore, AbstractBusinessStore):

    async def create_business(self, business: Business, seed_faqs: List[FAQItem]) -> Business:
        self.db.faqs[business.id] = [item.model_copy() for item in seed_faqs]
        self.db.businesses[business.id] = business.model_copy()
        return business

    async def get_business(self, business_id: str) -> Optional[Business]:
        business = self.db.businesses.get(business_id)
        return business.model_copy() if business else None


class InMemoryStaffStore(_InMemoryStore, AbstractStaffStore):

    async def add_staff(self, staff: StaffInDB) -> StaffInDB:
        self.db.staff.append(staff.model_copy())
        return staff

    async def list_staff(self, business_id: str) -> List[StaffInDB]:
        return [s.model_copy() for s in self.db.staff if s.business_id == business_id]


class InMemoryBookingStore(_InMemoryStore, AbstractBookingStore):

    async def add_booking(self, booking: Booking) -> Booking:
        self.db.bookings.append(booking.model_copy())
        return booking

    async def list_bookings(
        self,
        business_id: str,
        staff_id: Optional[str] = None,
        exclude_status: Optional[str] = None,
    ) -> List[Booking]:
        return [
            b.model_copy() for b in self.db.bookings
            if b.business_id == business_id
            and (staff_id is None or b.staff_id == staff_id)
            and (exclude_status is None or b.status != exclude_status)
        ]

    async def update_booking_status(self, business_id: str, booking_id: str, status: str) -> Optional[Booking]:
        for booking in self.db.bookings:
            if booking.business_id == business_id and booking.id == booking_id:
                booking.status = status
                return booking.model_copy()
        return None


class InMemoryLeadStore(_InMemoryStore, AbstractLeadStore):

    async def add_lead(self, lead: Lead) -> Lead:
        self.db.leads.append(lead.model_copy())
        return lead

    async def list_leads(self, business_id: str) -> List[Lead]:
        return [lead.model_copy() for lead in self.db.leads if lead.business_id == business_id]


class InMemoryAttendanceStore(_InMemoryStore, AbstractAttendanceStore):

    async def add_event(self, event: AttendanceEvent) -> AttendanceEvent:
        self.db.attendance.append(event.model_copy())
        return event

    async def list_events(self, business_id: str, staff_id: Optional[str] = None) -> List[AttendanceEvent]:
        return [
            e.model_copy() for e in self.db.attendance
            if e.business_id == business_id and (staff_id is None or e.staff_id == staff_id)
        ]


class InMemoryOvertimeStore(_InMemoryStore, AbstractOvertimeStore):

    async def add_request(self, request: OvertimeRequest) -> OvertimeRequest:
        self.db.overtime.append(request.model_copy())
        return request

    async def list_requests(self, business_id: str, staff_id: Optional[str] = None) -> List[OvertimeRequest]:
        return [
            r.model_copy() for r in self.db.overtime
            if r.business_id == business_id and (staff_id is None or r.staff_id == staff_id)
        ]

    async def update_request_status(self, business_id: str, request_id: str, status: str) -> Optional[OvertimeRequest]:
        for request in self.db.overtime:
            if request.business_id == business_id and request.id == request_id:
                request.status = status
                return request.model_copy()
        return None


class InMemoryFAQStore(_InMemoryStore, AbstractFAQStore):

    async def get_faqs(self, business_id: str) -> List[FAQItem]:
        return [item.model_copy() for item in self.db.faqs.get(business_id, [])]

    async def replace_faqs(self, business_id: str, items: List[FAQItem]) -> List[FAQItem]:
        self.db.faqs[business_id] = [item.model_copy() for item in items]
        return items
