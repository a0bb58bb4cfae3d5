# alice_api/staff/__init__.py
"""
Staff records, attendance and overtime.

Login itself lives in ``alice_api.auth``; the ``/staff`` routes that need a
session use its gates.
"""

from .models import (
    StaffCreate,
    StaffInDB,
    StaffCreatedResponse,
    AttendanceEvent,
    OvertimeRequest,
    OvertimeRequestCreate,
    AgendaResponse,
)

__all__ = [
    "StaffCreate",
    "StaffInDB",
    "StaffCreatedResponse",
    "AttendanceEvent",
    "OvertimeRequest",
    "OvertimeRequestCreate",
    "AgendaResponse",
]
