"""
Tasklist - Database Module

Thread-safe SQLite database with thread-local connections.
"""
import sqlite3
import logging
import threading
from pathlib import Path
from typing import Optional, List, Union

from .schema import init_schema

_db_logger = logging.getLogger("tasklist.database")


class Database:
    """
    Thread-safe SQLite database manager.

    Uses thread-local connections for safety.
    NOT a singleton - create instances as needed, but typically use one per app.
    """

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        """
        Initialize database.

        Args:
            db_path: Path to database file. If None, uses default from settings.

        Raises:
            sqlite3.DatabaseError: the file exists but is not a healthy
                SQLite database. The file is left untouched.
        """
        if db_path is None:
            from ..config.settings import settings
            db_path = settings.database.path
            self._wal_mode = settings.database.wal_mode
            self._busy_timeout_ms = settings.database.busy_timeout_ms
        else:
            self._wal_mode = True
            self._busy_timeout_ms = 5000

        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

        self._local = threading.local()

        try:
            conn = self._get_connection()
            self._startup_integrity_check(conn)
        except sqlite3.DatabaseError as e:
            _db_logger.error("Cannot open task database at %s: %s", self._db_path, e)
            self.close()
            raise
        init_schema(conn)

    @property
    def path(self) -> Path:
        return self._db_path

    def _startup_integrity_check(self, conn: sqlite3.Connection) -> None:
        """Run integrity check once at startup."""
        result = conn.execute("PRAGMA integrity_check").fetchone()
        if result[0] != "ok":
            raise sqlite3.DatabaseError("integrity_check returned: " + result[0])

    def _get_connection(self) -> sqlite3.Connection:
        """Get thread-local connection."""
        if getattr(self._local, 'connection', None) is None:
            conn = sqlite3.connect(
                str(self._db_path),
                check_same_thread=False,
                timeout=self._busy_timeout_ms / 1000.0,
            )
            conn.row_factory = sqlite3.Row

            try:
                journal_mode = "WAL" if self._wal_mode else "DELETE"
                conn.execute(f"PRAGMA journal_mode = {journal_mode}")
                conn.execute(f"PRAGMA busy_timeout = {self._busy_timeout_ms}")
                conn.execute("PRAGMA synchronous = NORMAL")
            except sqlite3.DatabaseError:
                conn.close()
                raise

            self._local.connection = conn

        return self._local.connection

    def execute(
        self,
        sql: str,
        params: tuple = (),
    ) -> int:
        """
        Execute SQL, commit, and return last row id.

        Args:
            sql: SQL statement
            params: Query parameters

        Returns:
            Last inserted row ID (for INSERT)
        """
        conn = self._get_connection()
        cursor = conn.execute(sql, params)
        conn.commit()
        return cursor.lastrowid

    def execute_rowcount(
        self,
        sql: str,
        params: tuple = (),
    ) -> int:
        """Execute SQL, commit, and return the number of affected rows."""
        conn = self._get_connection()
        cursor = conn.execute(sql, params)
        conn.commit()
        return cursor.rowcount

    def fetch_one(
        self,
        sql: str,
        params: tuple = (),
    ) -> Optional[sqlite3.Row]:
        """Fetch single row or None."""
        conn = self._get_connection()
        cursor = conn.execute(sql, params)
        return cursor.fetchone()

    def fetch_all(
        self,
        sql: str,
        params: tuple = (),
    ) -> List[sqlite3.Row]:
        """Fetch all rows."""
        conn = self._get_connection()
        cursor = conn.execute(sql, params)
        return cursor.fetchall()

    def close(self) -> None:
        """Close current thread's connection."""
        if getattr(self._local, 'connection', None) is not None:
            self._local.connection.close()
            self._local.connection = None
