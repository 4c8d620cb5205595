"""
Core module for litecache.

Contains data models, the value codec, and exceptions.
"""

from litecache.core.codec import TRUE_SENTINEL, decode_value, encode_value
from litecache.core.exceptions import (
    CacheError,
    LiteCacheError,
    StoreOpenError,
)
from litecache.core.models import DEFAULT_PATH, CacheOptions, CacheRow

__all__ = [
    # Models
    "CacheOptions",
    "CacheRow",
    "DEFAULT_PATH",
    # Codec
    "TRUE_SENTINEL",
    "decode_value",
    "encode_value",
    # Exceptions
    "LiteCacheError",
    "CacheError",
    "StoreOpenError",
]
