# alice_api/auth/dependencies.py
"""Access gates: tenant resolution and staff-session verification.

Routes opt into either gate with ``Depends``. Both run before the handler
body and short-circuit with 401 on failure.
"""
import logging
from typing import Annotated, Optional

from fastapi import Depends, Header

from ..businesses.models import Business
from ..dependencies import get_store_registry, get_token_manager
from ..storage.registry import StoreRegistry
from .errors import SessionTokenValidationError, TenantResolutionError
from .models import SessionClaims
from .service import StaffIdentityService
from .token_manager import SessionTokenManagerProtocol

logger = logging.getLogger(__name__)


def get_staff_identity_service(
    stores: Annotated[StoreRegistry, Depends(get_store_registry)],
    token_manager: Annotated[SessionTokenManagerProtocol, Depends(get_token_manager)],
) -> StaffIdentityService:
    """Factory function to create StaffIdentityService with injected dependencies."""
    return StaffIdentityService(stores.staff, token_manager)


async def require_tenant(
    stores: Annotated[StoreRegistry, Depends(get_store_registry)],
    x_business_id: Annotated[
        Optional[str],
        Header(alias="X-Business-Id", description="Identifier of the business (tenant) being addressed."),
    ] = None,
) -> Business:
    """Resolve the business named by the X-Business-Id header."""
    if not x_business_id:
        logger.warning("Tenant gate: X-Business-Id header missing.")
        raise TenantResolutionError()

    business = await stores.businesses.get_business(x_business_id)
    if business is None:
        logger.warning(f"Tenant gate: unknown business '{x_business_id}'.")
        raise TenantResolutionError()
    return business


async def require_staff_session(
    identity: Annotated[StaffIdentityService, Depends(get_staff_identity_service)],
    authorization: Annotated[Optional[str], Header()] = None,
) -> SessionClaims:
    """Verify the bearer session token and return the staff identity it carries."""
    if not authorization:
        logger.warning("Staff gate: Authorization header missing.")
        raise SessionTokenValidationError("Missing Authorization")

    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() != "bearer" or not credentials.strip():
        logger.warning("Staff gate: malformed Authorization header.")
        raise SessionTokenValidationError()

    return identity.verify(credentials.strip())


TenantDep = Annotated[Business, Depends(require_tenant)]
StaffSessionDep = Annotated[SessionClaims, Depends(require_staff_session)]
