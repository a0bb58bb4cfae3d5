# alice_api/businesses/service.py
import logging

from ..faqs.models import DEFAULT_FAQS
from ..storage.interfaces import AbstractBusinessStore
from .models import Business, BusinessCreate

logger = logging.getLogger(__name__)


class BusinessService:
    """
    Tenant registry operations.

    Businesses are created once and never updated or deleted.
    """

    def __init__(self, business_store: AbstractBusinessStore, default_timezone: str):
        self.business_store = business_store
        self.default_timezone = default_timezone

    async def create_business(self, business_create: BusinessCreate) -> Business:
        """
        Create a business and seed its default FAQ list.

        The store writes both in one unit, so creation only succeeds if the
        FAQs were seeded too.
        """
        business = Business(
            name=business_create.name,
            industry=business_create.industry,
            timezone=business_create.timezone or self.default_timezone,
        )
        logger.info(f"Service: Creating business '{business.name}' ({business.industry}) as '{business.id}'.")
        return await self.business_store.create_business(business, DEFAULT_FAQS)
