"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import pytest

from lrucache.cache.index import KeyIndex
from lrucache.cache.lru import LRUCache
from lrucache.cache.recency import RecencyList
from lrucache.cache.concurrent import SynchronizedLRUCache


def assert_consistent(cache: LRUCache) -> None:
    """Check the index/list bijection and the capacity bound."""
    recency = cache._recency
    index = cache._index

    locators = list(recency)
    assert len(locators) == len(recency) == len(index) == cache.size()
    assert cache.size() <= cache.capacity
    for locator in locators:
        assert index.lookup(recency.entry(locator).key) == locator


# ============================================================================
# Structure Fixtures
# ============================================================================

@pytest.fixture
def recency() -> RecencyList:
    """Create an empty RecencyList."""
    return RecencyList()


@pytest.fixture
def index() -> KeyIndex:
    """Create an empty KeyIndex."""
    return KeyIndex()


# ============================================================================
# Cache Fixtures
# ============================================================================

@pytest.fixture
def cache() -> LRUCache:
    """Create a cache with room for 100 entries."""
    return LRUCache(capacity=100)


@pytest.fixture
def small_cache() -> LRUCache:
    """Create a cache with small capacity for eviction testing (5 entries)."""
    return LRUCache(capacity=5)


@pytest.fixture
def synchronized_cache() -> SynchronizedLRUCache:
    """Create a lock-guarded cache (5 entries max)."""
    return SynchronizedLRUCache(capacity=5)


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
