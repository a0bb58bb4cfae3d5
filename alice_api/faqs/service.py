# alice_api/faqs/service.py
import logging
from typing import List

from ..storage.interfaces import AbstractFAQStore
from .models import FAQItem

logger = logging.getLogger(__name__)


class FAQService:

    def __init__(self, faq_store: AbstractFAQStore):
        self.faq_store = faq_store

    async def get_faqs(self, business_id: str) -> List[FAQItem]:
        return await self.faq_store.get_faqs(business_id)

    async def replace_faqs(self, business_id: str, items: List[FAQItem]) -> List[FAQItem]:
        """Overwrite the whole FAQ list; entries not in `items` are gone afterwards."""
        logger.info(f"Service: Replacing FAQ list of business '{business_id}' with {len(items)} item(s).")
        return await self.faq_store.replace_faqs(business_id, items)
