# alice_api/bookings/__init__.py
from .models import Booking, BookingCreate, BOOKING_CONFIRMED, BOOKING_CANCELLED

__all__ = ["Booking", "BookingCreate", "BOOKING_CONFIRMED", "BOOKING_CANCELLED"]
