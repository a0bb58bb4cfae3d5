# alice_api/faqs/models.py
from pydantic import Field
from typing import List

from ..core.models import ApiModel


class FAQItem(ApiModel):
    """A single question/answer pair."""
    q: str
    a: str


class FAQReplaceRequest(ApiModel):
    """Full replacement of a business's FAQ list. An empty list clears it."""
    items: List[FAQItem] = Field(description="The new FAQ list, in display order.")


# Seeded for every business at creation time
DEFAULT_FAQS: List[FAQItem] = [
    FAQItem(q="What are your hours?", a="Mon–Sat 9:00–18:00"),
    FAQItem(q="Do you accept walk-ins?", a="Yes, subject to availability."),
]
