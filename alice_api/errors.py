# alice_api/errors.py
from typing import Dict, Optional

from fastapi import HTTPException


class ApiError(HTTPException):
    """Base class for errors the API reports to clients.

    Rendered by the application's exception handler as ``{"error": detail}``
    with the given status code and headers.
    """

    def __init__(self, status_code: int, detail: str, headers: Optional[Dict[str, str]] = None):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class InsecureConfigurationError(RuntimeError):
    """Raised at startup when the configuration is unsafe for the current environment."""
