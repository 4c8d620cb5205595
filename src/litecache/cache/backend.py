"""
SQLite storage backend.

Wraps a single sqlite3 connection behind the few calls the cache needs:
open a file or an in-memory database, run a parameterized statement,
fetch one row, and close.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Any, Generator, Optional, Sequence

from litecache.core.exceptions import CacheError, StoreOpenError
from litecache.core.models import MEMORY_PATH

logger = logging.getLogger(__name__)

SCHEMA = """
    CREATE TABLE IF NOT EXISTS cache (
        key TEXT PRIMARY KEY,
        value TEXT,
        ttl INTEGER
    );
"""


class SQLiteBackend:
    """A sqlite3 connection holding the ``cache`` table."""

    def __init__(self, location: str = MEMORY_PATH):
        """Open the database and ensure the schema exists.

        Args:
            location: File path, or ``":memory:"`` for a transient database.

        Raises:
            StoreOpenError: If the file cannot be opened or initialized.
        """
        self.location = location

        try:
            self._conn = sqlite3.connect(location)
        except sqlite3.Error as e:
            raise StoreOpenError(location, str(e))

        self._conn.row_factory = sqlite3.Row
        try:
            self._conn.executescript(SCHEMA)
        except sqlite3.Error as e:
            self._conn.close()
            raise StoreOpenError(location, str(e))

        logger.debug("Opened cache store at %s", location)

    @contextmanager
    def _transaction(self, operation: str) -> Generator[sqlite3.Connection, None, None]:
        """Run statements that commit on success and roll back on failure.

        Yields:
            The underlying sqlite3.Connection.

        Raises:
            CacheError: If any statement fails, including parameters sqlite3
                cannot bind.
        """
        try:
            yield self._conn
            self._conn.commit()
        except (sqlite3.Error, OverflowError) as e:
            try:
                self._conn.rollback()
            except sqlite3.Error as rollback_error:
                logger.debug("Rollback failed during %s: %s", operation, rollback_error)
            raise CacheError(operation, str(e))

    def execute(self, operation: str, sql: str, params: Sequence[Any] = ()) -> int:
        """Execute a write statement.

        Args:
            operation: Name used in error messages.
            sql: Parameterized SQL.
            params: Statement parameters.

        Returns:
            Number of rows affected.
        """
        with self._transaction(operation) as conn:
            cursor = conn.execute(sql, params)
            return cursor.rowcount

    def fetch_one(
        self, operation: str, sql: str, params: Sequence[Any] = ()
    ) -> Optional[sqlite3.Row]:
        """Execute a query and return its first row, if any."""
        with self._transaction(operation) as conn:
            return conn.execute(sql, params).fetchone()

    def close(self) -> None:
        """Close the connection."""
        self._conn.close()
        logger.debug("Closed cache store at %s", self.location)
