# alice_api/bookings/endpoints.py
import logging
from fastapi import APIRouter, Depends
from typing import Annotated, List

from ..auth.dependencies import TenantDep
from ..dependencies import get_store_registry
from ..storage.registry import StoreRegistry
from .models import Booking, BookingCreate
from .service import BookingService

logger = logging.getLogger(__name__)

bookings_router = APIRouter(prefix="/bookings", tags=["Bookings"])


def get_booking_service(stores: Annotated[StoreRegistry, Depends(get_store_registry)]) -> BookingService:
    return BookingService(stores.bookings)


@bookings_router.post("", response_model=Booking)
async def create_booking_endpoint(
    booking_create: BookingCreate,
    business: TenantDep,
    service: Annotated[BookingService, Depends(get_booking_service)],
):
    """Create a booking for the business named in X-Business-Id."""
    return await service.create_booking(business.id, booking_create)


@bookings_router.get("", response_model=List[Booking])
async def list_bookings_endpoint(
    business: TenantDep,
    service: Annotated[BookingService, Depends(get_booking_service)],
):
    """All bookings of the business, in the order they were made."""
    return await service.list_bookings(business.id)
