"""
litecache

A minimal key-value cache with optional TTL expiration and optional
on-disk persistence, backed by SQLite.

Quick Start:
    >>> from litecache import CacheStore
    >>> cache = CacheStore()
    >>> cache.put("greeting", {"text": "hello"}, ttl=60_000)
    True
    >>> cache.get("greeting")
    {'text': 'hello'}

    # Or keep entries on disk:
    >>> with CacheStore(persistent=True, path="my.sqlite") as cache:
    ...     cache.put("flag", True)
    True
"""

__version__ = "0.1.0"

from litecache.cache.store import CacheStore

# Exceptions
from litecache.core.exceptions import (
    CacheError,
    LiteCacheError,
    StoreOpenError,
)

# Data models
from litecache.core.models import CacheOptions, CacheRow

__all__ = [
    # Version
    "__version__",
    # Store
    "CacheStore",
    # Models
    "CacheOptions",
    "CacheRow",
    # Exceptions
    "LiteCacheError",
    "CacheError",
    "StoreOpenError",
]
