"""
Tests for the exception hierarchy.
"""

from litecache.core.exceptions import CacheError, LiteCacheError, StoreOpenError


class TestExceptions:
    """Tests for exception messages and inheritance."""

    def test_base_without_details(self):
        assert str(LiteCacheError("boom")) == "boom"

    def test_base_with_details(self):
        assert str(LiteCacheError("boom", details="why")) == "boom: why"

    def test_cache_error(self):
        err = CacheError("put", "disk full")
        assert err.operation == "put"
        assert str(err) == "Cache error during put: disk full"

    def test_store_open_error(self):
        err = StoreOpenError("/tmp/x.sqlite", "unable to open database file")
        assert isinstance(err, CacheError)
        assert isinstance(err, LiteCacheError)
        assert err.operation == "open"
        assert err.path == "/tmp/x.sqlite"
        assert str(err) == "Could not open cache store at /tmp/x.sqlite: unable to open database file"
