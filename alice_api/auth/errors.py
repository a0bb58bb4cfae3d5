# alice_api/auth/errors.py
from fastapi import status

from ..errors import ApiError


class StaffAuthError(ApiError):
    """Base exception class for tenant and staff authentication failures.

    All of them map to 401 Unauthorized.
    """

    def __init__(self, detail: str, headers=None):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail, headers=headers)


class TenantResolutionError(StaffAuthError):
    """Raised when the X-Business-Id header is missing or names an unknown business."""

    def __init__(self, detail: str = "Missing or invalid X-Business-Id"):
        super().__init__(detail=detail)


class InvalidCredentialsError(StaffAuthError):
    """Raised when no staff member of the business matches name, national ID and PIN."""

    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(detail=detail)


class SessionTokenValidationError(StaffAuthError):
    """Raised when a session token is missing, malformed, expired or wrongly signed.

    The client needs to log in again to obtain a new token.
    """

    def __init__(self, detail: str = "Invalid token"):
        super().__init__(detail=detail, headers={"WWW-Authenticate": "Bearer"})
