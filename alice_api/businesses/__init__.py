# alice_api/businesses/__init__.py
"""
Tenant registry: business records and the bootstrap endpoint.

Every other component scopes its data by the business id issued here.
"""

from .models import Business, BusinessCreate, BusinessCreatedResponse

__all__ = ["Business", "BusinessCreate", "BusinessCreatedResponse"]
