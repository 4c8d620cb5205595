"""
Pytest fixtures and configuration for litecache tests.

Provides a controllable clock and transient/persistent stores.
"""

from pathlib import Path

import pytest

from litecache.cache.store import CacheStore

# =============================================================================
# Clock
# =============================================================================


class FakeClock:
    """Epoch-millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int) -> None:
        self.now += millis


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock."""
    return FakeClock()


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def store(clock):
    """Create a transient store driven by the fake clock."""
    cache = CacheStore(clock=clock)
    yield cache
    cache.close()


@pytest.fixture
def db_path(tmp_path) -> Path:
    """Path to a cache file inside a temporary directory."""
    return tmp_path / "test-cache.sqlite"


@pytest.fixture
def persistent_store(db_path, clock):
    """Create a file-backed store in a temporary directory."""
    cache = CacheStore(persistent=True, path=str(db_path), clock=clock)
    yield cache
    cache.close()
