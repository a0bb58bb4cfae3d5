# alice_api/businesses/endpoints.py
import logging
from fastapi import APIRouter, Depends
from typing import Annotated

from ..dependencies import get_app_settings, get_store_registry
from ..settings import Settings
from ..storage.registry import StoreRegistry
from .models import BusinessCreate, BusinessCreatedResponse
from .service import BusinessService

logger = logging.getLogger(__name__)

businesses_router = APIRouter(prefix="/business", tags=["Businesses"])


def get_business_service(
    stores: Annotated[StoreRegistry, Depends(get_store_registry)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> BusinessService:
    """Factory function to create BusinessService with the injected business store."""
    return BusinessService(stores.businesses, default_timezone=settings.default_timezone)


@businesses_router.post("/create", response_model=BusinessCreatedResponse)
async def create_business_endpoint(
    business_create: BusinessCreate,
    service: Annotated[BusinessService, Depends(get_business_service)],
):
    """Bootstrap a new business (tenant). Seeds two default FAQs."""
    business = await service.create_business(business_create)
    return BusinessCreatedResponse(business_id=business.id, business=business)
