# alice_api/core/models.py
from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Generate an opaque, globally unique identifier for a new record."""
    return str(uuid4())


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


class ApiModel(BaseModel):
    """
    Base model for everything that crosses the HTTP boundary.

    Attributes are snake_case in Python and camelCase on the wire
    (e.g. ``business_id`` <-> ``businessId``). Either form is accepted on input.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OkResponse(ApiModel):
    """Acknowledgement payload for write endpoints that return no entity."""
    ok: bool = True
