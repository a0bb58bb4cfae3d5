# alice_api/auth/service.py
import logging
import secrets

from ..storage.interfaces import AbstractStaffStore
from .errors import InvalidCredentialsError
from .models import SessionClaims, StaffLoginRequest, StaffPublic, StaffSessionResponse
from .token_manager import SessionTokenManagerProtocol

logger = logging.getLogger(__name__)


def _same(a: str, b: str) -> bool:
    return secrets.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


class StaffIdentityService:
    """
    Authenticates staff members and issues/verifies their session tokens.

    Credentials are the (name, national ID, PIN) triple, scoped to one business.
    """

    def __init__(self, staff_store: AbstractStaffStore, token_manager: SessionTokenManagerProtocol):
        self.staff_store = staff_store
        self.token_manager = token_manager

    async def login(self, business_id: str, credentials: StaffLoginRequest) -> StaffSessionResponse:
        """
        Log a staff member in and return a signed session.

        Duplicate credential triples are allowed at creation, so the first
        matching record (in insertion order) wins.

        Raises:
            InvalidCredentialsError: if no staff record matches all three fields
        """
        for staff in await self.staff_store.list_staff(business_id):
            if (
                staff.name == credentials.name
                and staff.national_id == credentials.national_id
                and _same(staff.pin, credentials.pin)
            ):
                claims = SessionClaims(staff_id=staff.id, business_id=business_id, role=staff.role)
                token = self.token_manager.issue_token(claims)
                logger.info(f"Staff '{staff.id}' logged in to business '{business_id}'.")
                return StaffSessionResponse(
                    token=token,
                    staff=StaffPublic(id=staff.id, name=staff.name, role=staff.role),
                )

        logger.warning(f"Failed staff login for business '{business_id}'.")
        raise InvalidCredentialsError()

    def verify(self, token: str) -> SessionClaims:
        """Decode a session token. Raises SessionTokenValidationError if it is not valid."""
        return self.token_manager.verify_token(token)
