# alice_api/auth/__init__.py
"""
Staff authentication: credential login, signed session tokens and the
access gates that protect tenant- and staff-scoped routes.

Only models and errors are re-exported here; import services, gates and the
router from their modules.
"""

from .models import SessionClaims, StaffLoginRequest, StaffPublic, StaffSessionResponse
from .errors import (
    StaffAuthError,
    TenantResolutionError,
    InvalidCredentialsError,
    SessionTokenValidationError,
)

__all__ = [
    "SessionClaims",
    "StaffLoginRequest",
    "StaffPublic",
    "StaffSessionResponse",
    "StaffAuthError",
    "TenantResolutionError",
    "InvalidCredentialsError",
    "SessionTokenValidationError",
]
