# alice_api/storage/sqlite_base.py
import sqlite3
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

IN_MEMORY_PATH = ":memory:"

# Every table keeps an autoincrement `seq` so listings can follow insertion order.
_SCHEMA = {
    "businesses": '''
    CREATE TABLE IF NOT EXISTS businesses (
        seq INTEGER PRIMARY KEY AUTOINCREMENT,
        id TEXT NOT NULL UNIQUE,
        name TEXT NOT NULL,
        industry TEXT NOT NULL,
        timezone TEXT NOT NULL
    )
    ''',
    "staff": '''
    CREATE TABLE IF NOT EXISTS staff (
        seq INTEGER PRIMARY KEY AUTOINCREMENT,
        id TEXT NOT NULL UNIQUE,
        business_id TEXT NOT NULL,
        name TEXT NOT NULL,
        national_id TEXT NOT NULL,
        pin TEXT NOT NULL,
        role TEXT NOT NULL
    )
    ''',
    "bookings": '''
    CREATE TABLE IF NOT EXISTS bookings (
        seq INTEGER PRIMARY KEY AUTOINCREMENT,
        id TEXT NOT NULL UNIQUE,
        business_id TEXT NOT NULL,
        client_name TEXT NOT NULL,
        contact TEXT NOT NULL,
        service TEXT NOT NULL,
        "when" TEXT NOT NULL,
        staff_id TEXT,
        notes TEXT NOT NULL DEFAULT '',
        status TEXT NOT NULL
    )
    ''',
    "leads": '''
    CREATE TABLE IF NOT EXISTS leads (
        seq INTEGER PRIMARY KEY AUTOINCREMENT,
        id TEXT NOT NULL UNIQUE,
        business_id TEXT NOT NULL,
        name TEXT NOT NULL,
        contact TEXT NOT NULL,
        service TEXT,
        budget, -- no declared type: numbers and free text are stored as given
        source TEXT,
        notes TEXT
    )
    ''',
    "attendance_events": '''
    CREATE TABLE IF NOT EXISTS attendance_events (
        seq INTEGER PRIMARY KEY AUTOINCREMENT,
        id TEXT NOT NULL UNIQUE,
        business_id TEXT NOT NULL,
        staff_id TEXT NOT NULL,
        type TEXT NOT NULL,
        timestamp TEXT NOT NULL
    )
    ''',
    "overtime_requests": '''
    CREATE TABLE IF NOT EXISTS overtime_requests (
        seq INTEGER PRIMARY KEY AUTOINCREMENT,
        id TEXT NOT NULL UNIQUE,
        business_id TEXT NOT NULL,
        staff_id TEXT NOT NULL,
        hours REAL NOT NULL,
        reason TEXT NOT NULL DEFAULT '',
        status TEXT NOT NULL
    )
    ''',
    "faqs": '''
    CREATE TABLE IF NOT EXISTS faqs (
        business_id TEXT PRIMARY KEY,
        items_json TEXT NOT NULL
    )
    ''',
}


class SQLiteDatabase:
    """
    Owns the single SQLite connection shared by all SQLite stores of an app.

    Constructed once per application and handed to every store, so tests can
    run isolated databases side by side.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._connection: Optional[sqlite3.Connection] = None

    async def get_connection(self) -> sqlite3.Connection:
        """
        Get or create the SQLite connection, creating the schema on first use.

        Raises:
            sqlite3.Error: If the database cannot be opened
        """
        if self._connection is None:
            try:
                if self.db_path == IN_MEMORY_PATH:
                    target = IN_MEMORY_PATH
                else:
                    db_file = Path(self.db_path).resolve()
                    db_file.parent.mkdir(parents=True, exist_ok=True)
                    target = str(db_file)

                logger.info(f"Connecting to SQLite DB at: {target}")
                # Requests are served from the event loop and TestClient's portal thread
                self._connection = sqlite3.connect(target, check_same_thread=False)
                self._connection.row_factory = sqlite3.Row

                await self.init_schema()
            except sqlite3.Error as e:
                logger.error(f"Error connecting to SQLite database at {self.db_path}: {e}", exc_info=True)
                self._connection = None
                raise
        return self._connection

    async def init_schema(self) -> None:
        """Create all tables if they don't exist yet."""
        conn = await self.get_connection()
        cursor = conn.cursor()
        for table_name, ddl in _SCHEMA.items():
            cursor.execute(ddl)
            logger.debug(f"Ensured '{table_name}' table exists.")
        conn.commit()
        logger.info("SQLite database schema initialized/verified.")

    async def close(self) -> None:
        if self._connection is not None:
            logger.info("Closing SQLite DB connection.")
            self._connection.close()
            self._connection = None
