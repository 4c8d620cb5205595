"""
SQLite-backed key-value cache.

Stores JSON-serializable values under string keys with optional TTL
expiration. Expired rows are removed lazily when read; nothing sweeps
the table in the background.
"""

import logging
import time
from pathlib import Path
from typing import Any, Callable, Optional, Union

from litecache.cache.backend import SQLiteBackend
from litecache.core.codec import decode_value, encode_value
from litecache.core.exceptions import CacheError
from litecache.core.models import CacheOptions, CacheRow

logger = logging.getLogger(__name__)


def epoch_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class CacheStore:
    """Key-value cache over a single SQLite table.

    ``True`` is stored as a sentinel string and ``None`` as SQL NULL, so a
    missing key and a stored ``None`` both read back as ``None`` from
    :meth:`get`. Use :meth:`has_key` to tell them apart.

    Example:
        >>> cache = CacheStore()
        >>> cache.put("a", "hello")
        True
        >>> cache.put("b", {"x": 1}, ttl=1000)
        True
        >>> cache.get("b")
        {'x': 1}
    """

    def __init__(
        self,
        options: Optional[CacheOptions] = None,
        *,
        persistent: Optional[bool] = None,
        path: Optional[Union[str, Path]] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        """Open the backing store.

        Args:
            options: Construction options. Defaults to a transient store.
            persistent: Overrides ``options.persistent``.
            path: Overrides ``options.path``.
            clock: Returns the current time in epoch milliseconds.

        Raises:
            StoreOpenError: If the database file cannot be opened.
        """
        options = options or CacheOptions()
        if persistent is not None:
            options = CacheOptions(persistent=persistent, path=options.path)
        if path is not None:
            options = CacheOptions(persistent=options.persistent, path=path)

        self.options = options
        self._clock = clock or epoch_millis
        self._backend = SQLiteBackend(options.resolved_path())

    def __enter__(self) -> "CacheStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _fetch_row(self, key: str) -> Optional[CacheRow]:
        try:
            row = self._backend.fetch_one(
                "get",
                "SELECT key, value, ttl FROM cache WHERE key = ?",
                (key,),
            )
        except CacheError as e:
            logger.warning("Lookup of %r failed: %s", key, e)
            return None

        if row is None:
            return None
        return CacheRow(key=row["key"], value=row["value"], ttl=row["ttl"])

    def _fetch_live_row(self, key: str) -> Optional[CacheRow]:
        """Fetch a row, deleting and discarding it if expired."""
        row = self._fetch_row(key)
        if row is None:
            return None

        if row.is_expired(self._clock()):
            logger.debug("Entry %r expired at %d, removing", key, row.ttl)
            self.delete(key)
            return None
        return row

    def get(self, key: str) -> Any:
        """Retrieve a value from the cache.

        Args:
            key: Cache key.

        Returns:
            The stored value, or None if the key is missing, expired, or
            holds None. Text that is not valid JSON is returned as-is.
        """
        row = self._fetch_live_row(key)
        if row is None:
            return None
        return decode_value(row.value)

    def put(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """Store a value in the cache.

        Args:
            key: Cache key.
            value: str, number, bool, None, or a JSON-serializable dict/list.
            ttl: Time-to-live in milliseconds. Never expires if omitted.

        Returns:
            True if the value was written, False otherwise.
        """
        try:
            encoded = encode_value(value)
        except (TypeError, ValueError, RecursionError) as e:
            logger.warning("Cannot encode value for %r: %s", key, e)
            return False

        expires_at = self._clock() + ttl if ttl is not None else None

        try:
            self._backend.execute(
                "put",
                "INSERT OR REPLACE INTO cache (key, value, ttl) VALUES (?, ?, ?)",
                (key, encoded, expires_at),
            )
        except CacheError as e:
            logger.warning("Failed to store %r: %s", key, e)
            return False
        return True

    def delete(self, key: str) -> bool:
        """Remove a key from the cache.

        Deleting a key that does not exist is not an error.

        Returns:
            True unless the storage operation failed.
        """
        try:
            self._backend.execute("delete", "DELETE FROM cache WHERE key = ?", (key,))
        except CacheError as e:
            logger.warning("Failed to delete %r: %s", key, e)
            return False
        return True

    def has_key(self, key: str) -> bool:
        """Check whether a key exists and has not expired."""
        return self._fetch_live_row(key) is not None

    hasKey = has_key

    def clear(self) -> None:
        """Remove all entries from the cache."""
        try:
            self._backend.execute("clear", "DELETE FROM cache")
        except CacheError as e:
            logger.warning("Failed to clear cache: %s", e)

    def close(self) -> None:
        """Close the underlying database connection."""
        self._backend.close()
