"""
Cache module for storing key-value entries.

Provides SQLite-based caching with TTL support.
"""

from litecache.cache.backend import SQLiteBackend
from litecache.cache.store import CacheStore

__all__ = ["CacheStore", "SQLiteBackend"]
