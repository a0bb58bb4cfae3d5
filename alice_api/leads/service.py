# alice_api/leads/service.py
import logging
from typing import List

from ..storage.interfaces import AbstractLeadStore
from .models import Lead, LeadCreate

logger = logging.getLogger(__name__)


class LeadService:

    def __init__(self, lead_store: AbstractLeadStore):
        self.lead_store = lead_store

    async def create_lead(self, business_id: str, lead_create: LeadCreate) -> Lead:
        lead = Lead(business_id=business_id, **lead_create.model_dump())
        logger.info(f"Service: Capturing lead '{lead.id}' for business '{business_id}' (source: {lead.source}).")
        return await self.lead_store.add_lead(lead)

    async def list_leads(self, business_id: str) -> List[Lead]:
        """All leads of a business. Not exposed over HTTP."""
        return await self.lead_store.list_leads(business_id)
