# alice_api/storage/sqlite_stores.py
import sqlite3
import logging
import json
from typing import Any, List, Optional, Sequence, Tuple

from ..businesses.models import Business
from ..bookings.models import Booking
from ..faqs.models import FAQItem
from ..leads.models import Lead
from ..staff.models import AttendanceEvent, OvertimeRequest, StaffInDB
from .interfaces import (
    AbstractAttendanceStore,
    AbstractBookingStore,
    AbstractBusinessStore,
    AbstractFAQStore,
    AbstractLeadStore,
    AbstractOvertimeStore,
    AbstractStaffStore,
)
from .sqlite_base import SQLiteDatabase

logger = logging.getLogger(__name__)


class _SQLiteStore:
    """Query helpers shared by the SQLite stores."""

    def __init__(self, database: SQLiteDatabase):
        self.database = database

    async def initialize(self) -> None:
        await self.database.get_connection()
        logger.info(f"{type(self).__name__} initialized.")

    async def teardown(self) -> None:
        """Connection is owned by SQLiteDatabase and closed by the registry."""
        logger.info(f"{type(self).__name__} teardown (connection managed by SQLiteDatabase).")

    async def _execute_query(self, query: str, params: tuple = (), commit: bool = True) -> sqlite3.Cursor:
        """
        Execute a SQL query with proper error handling and transaction management.

        Raises:
            sqlite3.Error: If query execution fails
        """
        conn = await self.database.get_connection()
        cursor = conn.cursor()
        try:
            logger.debug(f"Executing SQL: {query.strip()}")
            cursor.execute(query, params)
            if commit:
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"SQLite error executing query '{query.strip()}': {e}", exc_info=True)
            if commit:
                conn.rollback()
            raise
        return cursor

    async def _execute_in_transaction(self, statements: Sequence[Tuple[str, tuple]]) -> None:
        """Run several statements and commit them together, or roll all of them back."""
        conn = await self.database.get_connection()
        cursor = conn.cursor()
        try:
            for query, params in statements:
                cursor.execute(query, params)
            conn.commit()
        except sqlite3.Error as e:
            logger.error(f"SQLite transaction failed, rolling back: {e}", exc_info=True)
            conn.rollback()
            raise

    async def _fetchone(self, query: str, params: tuple = ()) -> Optional[sqlite3.Row]:
        cursor = await self._execute_query(query, params, commit=False)
        return cursor.fetchone()

    async def _fetchall(self, query: str, params: tuple = ()) -> List[sqlite3.Row]:
        cursor = await self._execute_query(query, params, commit=False)
        return cursor.fetchall()


def _filtered_select(table: str, business_id: str, **filters: Any) -> Tuple[str, tuple]:
    """Build a SELECT scoped to a business, with optional equality/inequality filters."""
    clauses = ["business_id = ?"]
    params: List[Any] = [business_id]
    for key, value in filters.items():
        if value is None:
            continue
        if key.startswith("not_"):
            clauses.append(f"{key[4:]} != ?")
        else:
            clauses.append(f"{key} = ?")
        params.append(value)
    query = f"SELECT * FROM {table} WHERE {' AND '.join(clauses)} ORDER BY seq"
    return query, tuple(params)


class SQLiteBusinessStore(_SQLiteStore, AbstractBusinessStore):

    def _row_to_business(self, row: Optional[sqlite3.Row]) -> Optional[Business]:
        if not row:
            return None
        return Business(id=row["id"], name=row["name"], industry=row["industry"], timezone=row["timezone"])

    async def create_business(self, business: Business, seed_faqs: List[FAQItem]) -> Business:
        items_json = json.dumps([item.model_dump() for item in seed_faqs])
        await self._execute_in_transaction([
            (
                "INSERT INTO businesses (id, name, industry, timezone) VALUES (?, ?, ?, ?)",
                (business.id, business.name, business.industry, business.timezone),
            ),
            (
                "INSERT OR REPLACE INTO faqs (business_id, items_json) VALUES (?, ?)",
                (business.id, items_json),
            ),
        ])
        logger.info(f"Stored business '{business.id}' with {len(seed_faqs)} seeded FAQs.")
        return business

    async def get_business(self, business_id: str) -> Optional[Business]:
        row = await self._fetchone("SELECT * FROM businesses WHERE id = ?", (business_id,))
        return self._row_to_business(row)


class SQLiteStaffStore(_SQLiteStore, AbstractStaffStore):

    async def add_staff(self, staff: StaffInDB) -> StaffInDB:
        query = """
            INSERT INTO staff (id, business_id, name, national_id, pin, role)
            VALUES (?, ?, ?, ?, ?, ?)
        """
        await self._execute_query(
            query, (staff.id, staff.business_id, staff.name, staff.national_id, staff.pin, staff.role)
        )
        return staff

    async def list_staff(self, business_id: str) -> List[StaffInDB]:
        query, params = _filtered_select("staff", business_id)
        rows = await self._fetchall(query, params)
        return [
            StaffInDB(
                id=row["id"],
                business_id=row["business_id"],
                name=row["name"],
                national_id=row["national_id"],
                pin=row["pin"],
                role=row["role"],
            )
            for row in rows
        ]


class SQLiteBookingStore(_SQLiteStore, AbstractBookingStore):

    def _row_to_booking(self, row: sqlite3.Row) -> Booking:
        return Booking(
            id=row["id"],
            business_id=row["business_id"],
            client_name=row["client_name"],
            contact=row["contact"],
            service=row["service"],
            when=row["when"],
            staff_id=row["staff_id"],
            notes=row["notes"],
            status=row["status"],
        )

    async def add_booking(self, booking: Booking) -> Booking:
        query = """
            INSERT INTO bookings (id, business_id, client_name, contact, service, "when", staff_id, notes, status)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """
        params = (
            booking.id,
            booking.business_id,
            booking.client_name,
            booking.contact,
            booking.service,
            booking.when,
            booking.staff_id,
            booking.notes,
            booking.status,
        )
        await self._execute_query(query, params)
        return booking

    async def list_bookings(
        self,
        business_id: str,
        staff_id: Optional[str] = None,
        exclude_status: Optional[str] = None,
    ) -> List[Booking]:
        query, params = _filtered_select("bookings", business_id, staff_id=staff_id, not_status=exclude_status)
        rows = await self._fetchall(query, params)
        return [self._row_to_booking(row) for row in rows]

    async def update_booking_status(self, business_id: str, booking_id: str, status: str) -> Optional[Booking]:
        cursor = await self._execute_query(
            "UPDATE bookings SET status = ? WHERE business_id = ? AND id = ?",
            (status, business_id, booking_id),
        )
        if cursor.rowcount == 0:
            return None
        row = await self._fetchone(
            "SELECT * FROM bookings WHERE business_id = ? AND id = ?", (business_id, booking_id)
        )
        return self._row_to_booking(row) if row else None


class SQLiteLeadStore(_SQLiteStore, AbstractLeadStore):

    async def add_lead(self, lead: Lead) -> Lead:
        query = """
            INSERT INTO leads (id, business_id, name, contact, service, budget, source, notes)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """
        params = (
            lead.id, lead.business_id, lead.name, lead.contact,
            lead.service, lead.budget, lead.source, lead.notes,
        )
        await self._execute_query(query, params)
        return lead

    async def list_leads(self, business_id: str) -> List[Lead]:
        query, params = _filtered_select("leads", business_id)
        rows = await self._fetchall(query, params)
        return [
            Lead(
                id=row["id"],
                business_id=row["business_id"],
                name=row["name"],
                contact=row["contact"],
                service=row["service"],
                budget=row["budget"],
                source=row["source"],
                notes=row["notes"],
            )
            for row in rows
        ]


class SQLiteAttendanceStore(_SQLiteStore, AbstractAttendanceStore):

    async def add_event(self, event: AttendanceEvent) -> AttendanceEvent:
        query = """
            INSERT INTO attendance_events (id, business_id, staff_id, type, timestamp)
            VALUES (?, ?, ?, ?, ?)
        """
        await self._execute_query(
            query, (event.id, event.business_id, event.staff_id, event.type, event.timestamp)
        )
        return event

    async def list_events(self, business_id: str, staff_id: Optional[str] = None) -> List[AttendanceEvent]:
        query, params = _filtered_select("attendance_events", business_id, staff_id=staff_id)
        rows = await self._fetchall(query, params)
        return [
            AttendanceEvent(
                id=row["id"],
                business_id=row["business_id"],
                staff_id=row["staff_id"],
                type=row["type"],
                timestamp=row["timestamp"],
            )
            for row in rows
        ]


class SQLiteOvertimeStore(_SQLiteStore, AbstractOvertimeStore):

    def _row_to_request(self, row: sqlite3.Row) -> OvertimeRequest:
        return OvertimeRequest(
            id=row["id"],
            business_id=row["business_id"],
            staff_id=row["staff_id"],
            hours=row["hours"],
            reason=row["reason"],
            status=row["status"],
        )

    async def add_request(self, request: OvertimeRequest) -> OvertimeRequest:
        query = """
            INSERT INTO overtime_requests (id, business_id, staff_id, hours, reason, status)
            VALUES (?, ?, ?, ?, ?, ?)
        """
        await self._execute_query(
            query,
            (request.id, request.business_id, request.staff_id, request.hours, request.reason, request.status),
        )
        return request

    async def list_requests(self, business_id: str, staff_id: Optional[str] = None) -> List[OvertimeRequest]:
        query, params = _filtered_select("overtime_requests", business_id, staff_id=staff_id)
        rows = await self._fetchall(query, params)
        return [self._row_to_request(row) for row in rows]

    async def update_request_status(self, business_id: str, request_id: str, status: str) -> Optional[OvertimeRequest]:
        cursor = await self._execute_query(
            "UPDATE overtime_requests SET status = ? WHERE business_id = ? AND id = ?",
            (status, business_id, request_id),
        )
        if cursor.rowcount == 0:
            return None
        row = await self._fetchone(
            "SELECT * FROM overtime_requests WHERE business_id = ? AND id = ?", (business_id, request_id)
        )
        return self._row_to_request(row) if row else None


class SQLiteFAQStore(_SQLiteStore, AbstractFAQStore):

    async def get_faqs(self, business_id: str) -> List[FAQItem]:
        row = await self._fetchone("SELECT items_json FROM faqs WHERE business_id = ?", (business_id,))
        if not row:
            return []
        return [FAQItem.model_validate(item) for item in json.loads(row["items_json"])]

    async def replace_faqs(self, business_id: str, items: List[FAQItem]) -> List[FAQItem]:
        items_json = json.dumps([item.model_dump() for item in items])
        await self._execute_query(
            "INSERT OR REPLACE INTO faqs (business_id, items_json) VALUES (?, ?)",
            (business_id, items_json),
        )
        return items
