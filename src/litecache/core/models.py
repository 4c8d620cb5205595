"""
Data models for litecache.

Contains the construction options and the row schema of the backing table.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

DEFAULT_PATH = "cache.sqlite"
MEMORY_PATH = ":memory:"


@dataclass
class CacheOptions:
    """Options for configuring a CacheStore.

    Attributes:
        persistent: Store the table in a SQLite file instead of memory.
        path: File location, only used when ``persistent`` is true.
    """

    persistent: bool = False
    path: Union[str, Path] = DEFAULT_PATH

    def resolved_path(self) -> str:
        """Database location handed to sqlite3."""
        if not self.persistent:
            return MEMORY_PATH
        return str(self.path)


@dataclass(frozen=True)
class CacheRow:
    """One row of the ``cache`` table."""

    key: str
    value: Optional[str]
    ttl: Optional[int]

    def is_expired(self, now: int) -> bool:
        return self.ttl is not None and self.ttl <= now
