# alice_api/auth/token_manager.py
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from .errors import SessionTokenValidationError
from .models import SessionClaims

logger = logging.getLogger(__name__)


class SessionTokenManagerProtocol(ABC):
    """Protocol defining the interface for staff session token operations."""

    @abstractmethod
    def issue_token(self, claims: SessionClaims, issued_at: Optional[datetime] = None) -> str:
        """Sign a new session token for the given identity."""
        pass

    @abstractmethod
    def verify_token(self, token: str) -> SessionClaims:
        """Return the identity carried by a token, or raise SessionTokenValidationError."""
        pass


class JWTSessionTokenManager(SessionTokenManagerProtocol):
    """
    Session tokens as signed (not encrypted) JWTs.

    Tokens are self-contained: there is no server-side record, so a token
    stays valid until it expires, whatever happens to the staff record.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", lifetime: timedelta = timedelta(hours=8)):
        self._secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime

    def issue_token(self, claims: SessionClaims, issued_at: Optional[datetime] = None) -> str:
        """
        Sign a token binding staff id, business id and role with an expiry.

        Args:
            claims: Identity to embed
            issued_at: Issue time, defaults to now. Expiry is issued_at + lifetime.
        """
        now = issued_at or datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "sub": claims.staff_id,
            "staffId": claims.staff_id,
            "businessId": claims.business_id,
            "role": claims.role,
            "iat": int(now.timestamp()),
            "exp": int((now + self.lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify_token(self, token: str) -> SessionClaims:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except JWTError as e:
            # Covers bad signature, expiry and malformed input
            logger.warning(f"Session token rejected: {e}")
            raise SessionTokenValidationError() from e

        staff_id = payload.get("staffId")
        business_id = payload.get("businessId")
        role = payload.get("role")
        if not all(isinstance(v, str) and v for v in (staff_id, business_id, role)):
            logger.warning("Session token rejected: required claims missing.")
            raise SessionTokenValidationError()

        return SessionClaims(staff_id=staff_id, business_id=business_id, role=role)
