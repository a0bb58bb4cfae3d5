# alice_api/faqs/__init__.py
from .models import FAQItem, FAQReplaceRequest, DEFAULT_FAQS

__all__ = ["FAQItem", "FAQReplaceRequest", "DEFAULT_FAQS"]
