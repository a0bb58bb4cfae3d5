# alice_api/bookings/service.py
import logging
from typing import List, Optional

from ..storage.interfaces import AbstractBookingStore
from .models import BOOKING_STATUSES, Booking, BookingCreate

logger = logging.getLogger(__name__)


class BookingService:

    def __init__(self, booking_store: AbstractBookingStore):
        self.booking_store = booking_store

    async def create_booking(self, business_id: str, booking_create: BookingCreate) -> Booking:
        """Record a booking. New bookings start out 'confirmed'."""
        booking = Booking(
            business_id=business_id,
            client_name=booking_create.client_name,
            contact=booking_create.contact,
            service=booking_create.service,
            when=booking_create.when,
            staff_id=booking_create.staff_id or None,
            notes=booking_create.notes or "",
        )
        logger.info(f"Service: Creating booking '{booking.id}' for business '{business_id}'.")
        return await self.booking_store.add_booking(booking)

    async def list_bookings(self, business_id: str) -> List[Booking]:
        return await self.booking_store.list_bookings(business_id)

    async def set_status(self, business_id: str, booking_id: str, status: str) -> Optional[Booking]:
        """
        Move a booking to another status, e.g. 'cancelled'.

        Returns None if the booking does not exist in that business.

        Raises:
            ValueError: if the status is not a known booking status
        """
        if status not in BOOKING_STATUSES:
            raise ValueError(f"Unknown booking status '{status}'.")
        logger.info(f"Service: Setting booking '{booking_id}' of business '{business_id}' to '{status}'.")
        return await self.booking_store.update_booking_status(business_id, booking_id, status)
