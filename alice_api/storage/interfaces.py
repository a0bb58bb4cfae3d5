# alice_api/storage/interfaces.py
from abc import ABC, abstractmethod
from typing import List, Optional

from ..businesses.models import Business
from ..bookings.models import Booking
from ..faqs.models import FAQItem
from ..leads.models import Lead
from ..staff.models import AttendanceEvent, OvertimeRequest, StaffInDB


class AbstractStore(ABC):
    """
    Lifecycle shared by every store backend.

    Every entity a store holds belongs to exactly one business, and every
    read is filtered by that business id. Listings return records in
    insertion order.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the storage backend and prepare it for operations."""
        pass

    @abstractmethod
    async def teardown(self) -> None:
        """Clean up resources and properly close the storage backend."""
        pass


class AbstractBusinessStore(AbstractStore):
    """Tenant registry storage."""

    @abstractmethod
    async def create_business(self, business: Business, seed_faqs: List[FAQItem]) -> Business:
        """
        Persist a new business together with its initial FAQ list.

        Both writes form one unit: if either fails, neither is kept.

        Args:
            business: The fully populated business record
            seed_faqs: FAQ entries the business starts with

        Returns:
            The stored business
        """
        pass

    @abstractmethod
    async def get_business(self, business_id: str) -> Optional[Business]:
        """Retrieve a business by id, or None if it does not exist."""
        pass


class AbstractStaffStore(AbstractStore):

    @abstractmethod
    async def add_staff(self, staff: StaffInDB) -> StaffInDB:
        """Append a staff record. Duplicate credentials are not rejected."""
        pass

    @abstractmethod
    async def list_staff(self, business_id: str) -> List[StaffInDB]:
        """All staff of a business, in insertion order."""
        pass


class AbstractBookingStore(AbstractStore):

    @abstractmethod
    async def add_booking(self, booking: Booking) -> Booking:
        pass

    @abstractmethod
    async def list_bookings(
        self,
        business_id: str,
        staff_id: Optional[str] = None,
        exclude_status: Optional[str] = None,
    ) -> List[Booking]:
        """
        Retrieve the bookings of a business.

        Args:
            business_id: Tenant whose bookings to return
            staff_id: If given, only bookings assigned to this staff member
            exclude_status: If given, bookings with this status are skipped

        Returns:
            Matching bookings in insertion order
        """
        pass

    @abstractmethod
    async def update_booking_status(self, business_id: str, booking_id: str, status: str) -> Optional[Booking]:
        """
        Change a booking's status in place.

        Returns:
            The updated booking, or None if no such booking exists in that business
        """
        pass


class AbstractLeadStore(AbstractStore):

    @abstractmethod
    async def add_lead(self, lead: Lead) -> Lead:
        pass

    @abstractmethod
    async def list_leads(self, business_id: str) -> List[Lead]:
        pass


class AbstractAttendanceStore(AbstractStore):

    @abstractmethod
    async def add_event(self, event: AttendanceEvent) -> AttendanceEvent:
        pass

    @abstractmethod
    async def list_events(self, business_id: str, staff_id: Optional[str] = None) -> List[AttendanceEvent]:
        pass


class AbstractOvertimeStore(AbstractStore):

    @abstractmethod
    async def add_request(self, request: OvertimeRequest) -> OvertimeRequest:
        pass

    @abstractmethod
    async def list_requests(self, business_id: str, staff_id: Optional[str] = None) -> List[OvertimeRequest]:
        pass

    @abstractmethod
    async def update_request_status(self, business_id: str, request_id: str, status: str) -> Optional[OvertimeRequest]:
        """Change an overtime request's status in place. None if not found in that business."""
        pass


class AbstractFAQStore(AbstractStore):

    @abstractmethod
    async def get_faqs(self, business_id: str) -> List[FAQItem]:
        """The FAQ list of a business, or an empty list if none was ever set."""
        pass

    @abstractmethod
    async def replace_faqs(self, business_id: str, items: List[FAQItem]) -> List[FAQItem]:
        """Overwrite the FAQ list of a business. Nothing from the previous list is kept."""
        pass
