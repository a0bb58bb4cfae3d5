# alice_api/staff/endpoints.py
import logging
from fastapi import APIRouter, Depends
from typing import Annotated

from ..auth.dependencies import StaffSessionDep, TenantDep, get_staff_identity_service
from ..auth.models import StaffLoginRequest, StaffSessionResponse
from ..auth.service import StaffIdentityService
from ..core.models import OkResponse
from ..dependencies import get_store_registry
from ..storage.registry import StoreRegistry
from .models import AgendaResponse, OvertimeRequest, OvertimeRequestCreate, StaffCreate, StaffCreatedResponse
from .service import StaffService

logger = logging.getLogger(__name__)

staff_router = APIRouter(prefix="/staff", tags=["Staff"])


def get_staff_service(stores: Annotated[StoreRegistry, Depends(get_store_registry)]) -> StaffService:
    """Factory function to create StaffService with the stores it touches."""
    return StaffService(
        staff_store=stores.staff,
        booking_store=stores.bookings,
        attendance_store=stores.attendance,
        overtime_store=stores.overtime,
    )


@staff_router.post("/login", response_model=StaffSessionResponse)
async def staff_login_endpoint(
    credentials: StaffLoginRequest,
    business: TenantDep,
    identity: Annotated[StaffIdentityService, Depends(get_staff_identity_service)],
):
    """Exchange name + national ID + PIN for a session token. 401 on any mismatch."""
    return await identity.login(business.id, credentials)


@staff_router.post("/create", response_model=StaffCreatedResponse)
async def create_staff_endpoint(
    staff_create: StaffCreate,
    business: TenantDep,
    service: Annotated[StaffService, Depends(get_staff_service)],
):
    staff = await service.create_staff(business.id, staff_create)
    return StaffCreatedResponse(id=staff.id)


@staff_router.get("/agenda", response_model=AgendaResponse)
async def staff_agenda_endpoint(
    session: StaffSessionDep,
    service: Annotated[StaffService, Depends(get_staff_service)],
):
    """The caller's own bookings, excluding cancelled ones."""
    return AgendaResponse(bookings=await service.get_agenda(session))


@staff_router.post("/clock-in", response_model=OkResponse)
async def clock_in_endpoint(
    session: StaffSessionDep,
    service: Annotated[StaffService, Depends(get_staff_service)],
):
    await service.record_attendance(session, "in")
    return OkResponse()


@staff_router.post("/clock-out", response_model=OkResponse)
async def clock_out_endpoint(
    session: StaffSessionDep,
    service: Annotated[StaffService, Depends(get_staff_service)],
):
    await service.record_attendance(session, "out")
    return OkResponse()


@staff_router.post("/overtime", response_model=OvertimeRequest)
async def request_overtime_endpoint(
    overtime_create: OvertimeRequestCreate,
    session: StaffSessionDep,
    service: Annotated[StaffService, Depends(get_staff_service)],
):
    """File an overtime request. It starts out 'pending'."""
    return await service.request_overtime(session, overtime_create)
