# alice_api/storage/registry.py
import logging
from dataclasses import dataclass, fields
from typing import List, Optional

from ..settings import Settings
from .interfaces import (
    AbstractAttendanceStore,
    AbstractBookingStore,
    AbstractBusinessStore,
    AbstractFAQStore,
    AbstractLeadStore,
    AbstractOvertimeStore,
    AbstractStaffStore,
    AbstractStore,
)
from .memory import (
    InMemoryAttendanceStore,
    InMemoryBookingStore,
    InMemoryBusinessStore,
    InMemoryDatabase,
    InMemoryFAQStore,
    InMemoryLeadStore,
    InMemoryOvertimeStore,
    InMemoryStaffStore,
)
from .sqlite_base import SQLiteDatabase
from .sqlite_stores import (
    SQLiteAttendanceStore,
    SQLiteBookingStore,
    SQLiteBusinessStore,
    SQLiteFAQStore,
    SQLiteLeadStore,
    SQLiteOvertimeStore,
    SQLiteStaffStore,
)

logger = logging.getLogger(__name__)


@dataclass
class StoreRegistry:
    """One store of each kind, all backed by the same database."""
    businesses: AbstractBusinessStore
    staff: AbstractStaffStore
    bookings: AbstractBookingStore
    leads: AbstractLeadStore
    attendance: AbstractAttendanceStore
    overtime: AbstractOvertimeStore
    faqs: AbstractFAQStore
    sqlite_database: Optional[SQLiteDatabase] = None

    def _stores(self) -> List[AbstractStore]:
        return [getattr(self, f.name) for f in fields(self) if f.name != "sqlite_database"]

    async def initialize(self) -> None:
        for store in self._stores():
            await store.initialize()
        logger.info("All resource stores initialized.")

    async def teardown(self) -> None:
        for store in reversed(self._stores()):
            try:
                await store.teardown()
            except Exception as e:
                logger.error(f"Teardown error in {type(store).__name__}: {e}", exc_info=True)
        if self.sqlite_database is not None:
            await self.sqlite_database.close()
        logger.info("All resource stores torn down.")


def build_memory_store_registry() -> StoreRegistry:
    db = InMemoryDatabase()
    return StoreRegistry(
        businesses=InMemoryBusinessStore(db),
        staff=InMemoryStaffStore(db),
        bookings=InMemoryBookingStore(db),
        leads=InMemoryLeadStore(db),
        attendance=InMemoryAttendanceStore(db),
        overtime=InMemoryOvertimeStore(db),
        faqs=InMemoryFAQStore(db),
    )


def build_sqlite_store_registry(db_path: str) -> StoreRegistry:
    database = SQLiteDatabase(db_path)
    return StoreRegistry(
        businesses=SQLiteBusinessStore(database),
        staff=SQLiteStaffStore(database),
        bookings=SQLiteBookingStore(database),
        leads=SQLiteLeadStore(database),
        attendance=SQLiteAttendanceStore(database),
        overtime=SQLiteOvertimeStore(database),
        faqs=SQLiteFAQStore(database),
        sqlite_database=database,
    )


def build_store_registry(settings: Settings) -> StoreRegistry:
    """Construct the stores for the configured backend. Nothing is opened until initialize()."""
    if settings.storage_backend == "memory":
        logger.info("Memory storage backend selected. All data is lost on restart.")
        return build_memory_store_registry()
    if settings.storage_backend == "sqlite":
        logger.info(f"SQLite storage backend selected ({settings.sqlite_db_path}).")
        return build_sqlite_store_registry(settings.sqlite_db_path)
    raise ValueError(f"Unsupported storage_backend: {settings.storage_backend}")
