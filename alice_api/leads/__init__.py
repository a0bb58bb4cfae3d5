# alice_api/leads/__init__.py
from .models import Lead, LeadCreate

__all__ = ["Lead", "LeadCreate"]
