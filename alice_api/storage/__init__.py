# alice_api/storage/__init__.py
"""Storage module initialization.

Abstract store interfaces plus two interchangeable backends: an in-memory
one for development and tests, and SQLite for data that should survive a
restart.
"""

from .interfaces import (
    AbstractAttendanceStore,
    AbstractBookingStore,
    AbstractBusinessStore,
    AbstractFAQStore,
    AbstractLeadStore,
    AbstractOvertimeStore,
    AbstractStaffStore,
)
from .registry import (
    StoreRegistry,
    build_memory_store_registry,
    build_sqlite_store_registry,
    build_store_registry,
)

__all__ = [
    "AbstractAttendanceStore",
    "AbstractBookingStore",
    "AbstractBusinessStore",
    "AbstractFAQStore",
    "AbstractLeadStore",
    "AbstractOvertimeStore",
    "AbstractStaffStore",
    "StoreRegistry",
    "build_memory_store_registry",
    "build_sqlite_store_registry",
    "build_store_registry",
]
