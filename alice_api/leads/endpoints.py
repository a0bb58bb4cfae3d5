# alice_api/leads/endpoints.py
from fastapi import APIRouter, Depends
from typing import Annotated

from ..auth.dependencies import TenantDep
from ..dependencies import get_store_registry
from ..storage.registry import StoreRegistry
from .models import Lead, LeadCreate
from .service import LeadService

leads_router = APIRouter(prefix="/leads", tags=["Leads"])


def get_lead_service(stores: Annotated[StoreRegistry, Depends(get_store_registry)]) -> LeadService:
    return LeadService(stores.leads)


@leads_router.post("", response_model=Lead)
async def create_lead_endpoint(
    lead_create: LeadCreate,
    business: TenantDep,
    service: Annotated[LeadService, Depends(get_lead_service)],
):
    return await service.create_lead(business.id, lead_create)
