# alice_api/faqs/endpoints.py
from fastapi import APIRouter, Depends
from typing import Annotated, List

from ..auth.dependencies import TenantDep
from ..core.models import OkResponse
from ..dependencies import get_store_registry
from ..storage.registry import StoreRegistry
from .models import FAQItem, FAQReplaceRequest
from .service import FAQService

faqs_router = APIRouter(prefix="/faqs", tags=["FAQs"])


def get_faq_service(stores: Annotated[StoreRegistry, Depends(get_store_registry)]) -> FAQService:
    return FAQService(stores.faqs)


@faqs_router.get("", response_model=List[FAQItem])
async def list_faqs_endpoint(
    business: TenantDep,
    service: Annotated[FAQService, Depends(get_faq_service)],
):
    return await service.get_faqs(business.id)


@faqs_router.post("", response_model=OkResponse)
async def replace_faqs_endpoint(
    replace_request: FAQReplaceRequest,
    business: TenantDep,
    service: Annotated[FAQService, Depends(get_faq_service)],
):
    """Replace (not merge) the business's FAQ list."""
    await service.replace_faqs(business.id, replace_request.items)
    return OkResponse()
