"""
Tests for the LRUCache facade

These tests verify the public cache contract:
- construction and capacity validation
- get(): Lookup result, never raising on a miss
- put(): insert or update in place
- delete(), contains(), peek() extensions

Run with: python -m pytest tests/test_lru.py -v
"""

import pytest

from lrucache import InvalidCapacityError, Lookup, LRUCache
from lrucache.cache import lru

from conftest import assert_consistent


class TestLRUCacheInit:
    """Test construction."""

    def test_init(self, cache: LRUCache):
        assert cache.capacity == 100
        assert cache.size() == 0
        assert len(cache) == 0

    @pytest.mark.parametrize("capacity", [0, -1, -100])
    def test_init_non_positive_capacity(self, capacity):
        with pytest.raises(InvalidCapacityError):
            LRUCache(capacity=capacity)

    @pytest.mark.parametrize("capacity", [1.5, "10", True])
    def test_init_non_integer_capacity(self, capacity):
        with pytest.raises(InvalidCapacityError):
            LRUCache(capacity=capacity)

    def test_invalid_capacity_is_value_error(self):
        with pytest.raises(ValueError):
            LRUCache(capacity=0)

    def test_default_capacity_from_settings(self, monkeypatch):
        monkeypatch.setattr(lru.settings, "DEFAULT_CAPACITY", 3)
        assert LRUCache().capacity == 3

    def test_capacity_is_read_only(self, cache: LRUCache):
        with pytest.raises(AttributeError):
            cache.capacity = 5


class TestLRUCacheGet:
    """Test get() method."""

    def test_get_empty_cache(self, cache: LRUCache):
        assert cache.get("missing") == Lookup(None, False)

    def test_get_returns_lookup(self, cache: LRUCache):
        cache.put("key1", "value1")

        result = cache.get("key1")

        assert result == ("value1", True)
        assert result.value == "value1"
        assert result.found is True

    def test_get_unpacks(self, cache: LRUCache):
        cache.put("key1", "value1")
        value, found = cache.get("key1")
        assert (value, found) == ("value1", True)

    def test_get_stored_none_is_found(self, cache: LRUCache):
        """A stored None is distinguishable from a miss."""
        cache.put("key1", None)
        assert cache.get("key1") == Lookup(None, True)

    def test_get_does_not_change_size(self, cache: LRUCache):
        cache.put("key1", "value1")
        cache.get("key1")
        cache.get("missing")
        assert cache.size() == 1

    def test_get_returns_value_verbatim(self, cache: LRUCache):
        value = {"nested": [1, 2, 3]}
        cache.put("key1", value)
        assert cache.get("key1").value is value

    def test_non_string_keys(self, cache: LRUCache):
        cache.put(1, "int")
        cache.put((1, 2), "tuple")
        cache.put(frozenset({3}), "frozenset")

        assert cache.get(1) == ("int", True)
        assert cache.get((1, 2)) == ("tuple", True)
        assert cache.get(frozenset({3})) == ("frozenset", True)


class TestLRUCachePut:
    """Test put() method."""

    def test_put_returns_none(self, cache: LRUCache):
        assert cache.put("key", "value") is None

    def test_put_then_get(self, cache: LRUCache):
        cache.put("key1", "value1")
        assert cache.get("key1") == ("value1", True)

    def test_put_update_existing_key(self, cache: LRUCache):
        cache.put("key1", "value1")
        cache.put("key1", "value2")

        assert cache.get("key1") == ("value2", True)
        assert cache.size() == 1

    def test_put_overwrite_multiple_times(self, cache: LRUCache):
        for i in range(10):
            cache.put("key", f"value{i}")

        assert cache.get("key") == ("value9", True)
        assert cache.size() == 1
        assert_consistent(cache)

    def test_put_multiple_keys(self, cache: LRUCache):
        for i in range(3):
            cache.put(f"key{i}", f"value{i}")

        assert cache.size() == 3
        for i in range(3):
            assert cache.get(f"key{i}") == (f"value{i}", True)
        assert_consistent(cache)


class TestLRUCacheDelete:
    """Test delete() method."""

    def test_delete(self, cache: LRUCache):
        cache.put("key1", "value1")

        assert cache.delete("key1") is True
        assert cache.get("key1") == Lookup(None, False)
        assert cache.size() == 0
        assert_consistent(cache)

    def test_delete_nonexistent(self, cache: LRUCache):
        assert cache.delete("nonexistent") is False

    def test_delete_twice(self, cache: LRUCache):
        cache.put("key1", "value1")
        cache.delete("key1")
        assert cache.delete("key1") is False

    def test_delete_then_put_reuses_slot(self, cache: LRUCache):
        cache.put("key1", "value1")
        cache.put("key2", "value2")
        arena_size = cache._recency.arena_size

        cache.delete("key1")
        cache.put("key3", "value3")

        assert cache._recency.arena_size == arena_size
        assert cache.get("key3") == ("value3", True)
        assert_consistent(cache)


class TestLRUCacheInspection:
    """Test read-only helpers."""

    def test_contains(self, cache: LRUCache):
        cache.put("key1", "value1")

        assert cache.contains("key1") is True
        assert cache.contains("nonexistent") is False
        assert "key1" in cache
        assert "nonexistent" not in cache

    def test_peek(self, cache: LRUCache):
        cache.put("key1", "value1")

        assert cache.peek("key1") == ("value1", True)
        assert cache.peek("missing") == (None, False)

    def test_lru_and_mru_key(self, cache: LRUCache):
        cache.put("key1", "value1")
        cache.put("key2", "value2")

        assert cache.lru_key() == "key1"
        assert cache.mru_key() == "key2"

    def test_lru_and_mru_key_empty(self, cache: LRUCache):
        assert cache.lru_key() is None
        assert cache.mru_key() is None

    def test_keys_in_eviction_order(self, cache: LRUCache):
        cache.put("key1", "value1")
        cache.put("key2", "value2")
        cache.put("key3", "value3")

        # Access key1 to make it MRU
        cache.get("key1")

        assert cache.keys() == ["key2", "key3", "key1"]

    def test_is_full(self, small_cache: LRUCache):
        assert small_cache.is_full() is False

        for i in range(5):
            small_cache.put(f"key{i}", f"value{i}")

        assert small_cache.is_full() is True

    def test_clear(self, cache: LRUCache):
        cache.put("key1", "value1")
        cache.put("key2", "value2")

        cache.clear()

        assert cache.size() == 0
        assert cache.get("key1") == (None, False)
        assert cache.keys() == []
        assert_consistent(cache)

    def test_usable_after_clear(self, small_cache: LRUCache):
        for i in range(8):
            small_cache.put(f"key{i}", i)
        small_cache.clear()

        for i in range(8):
            small_cache.put(f"new{i}", i)

        assert small_cache.keys() == [f"new{i}" for i in range(3, 8)]
        assert_consistent(small_cache)

    def test_get_stats(self, small_cache: LRUCache):
        for i in range(6):
            small_cache.put(f"key{i}", f"value{i}")
        small_cache.get("key5")
        small_cache.get("key0")

        stats = small_cache.get_stats()

        assert stats["size"] == 5
        assert stats["capacity"] == 5
        assert stats["utilization"] == 1.0
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["evictions"] == 1
        assert stats["lru_key"] == "key1"
        assert stats["mru_key"] == "key5"

    def test_peek_not_counted_in_stats(self, cache: LRUCache):
        cache.put("key1", "value1")
        cache.peek("key1")
        cache.peek("missing")

        stats = cache.get_stats()
        assert stats["hits"] == 0
        assert stats["misses"] == 0

    def test_repr(self, small_cache: LRUCache):
        small_cache.put("a", 1)
        assert repr(small_cache) == "LRUCache(capacity=5, size=1)"
