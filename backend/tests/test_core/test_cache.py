"""
Unit tests for MemoryCache
"""
from unittest.mock import patch

from orderdesk.core.cache import MemoryCache


class TestMemoryCache:

    def test_set_and_get(self, memory_cache):
        memory_cache.set("products:all", [1, 2, 3])

        assert memory_cache.get("products:all") == [1, 2, 3]

    def test_missing_key(self, memory_cache):
        assert memory_cache.get("nope") is None

    def test_entry_expires(self):
        cache = MemoryCache(default_ttl=60)
        with patch('orderdesk.core.cache.time.monotonic', return_value=1000.0):
            cache.set("key", "value")
        with patch('orderdesk.core.cache.time.monotonic', return_value=1059.0):
            assert cache.get("key") == "value"
        with patch('orderdesk.core.cache.time.monotonic', return_value=1060.0):
            assert cache.get("key") is None
        assert len(cache) == 0

    def test_per_entry_ttl(self, memory_cache):
        memory_cache.set("short", "value", ttl=0)

        assert memory_cache.get("short") is None

    def test_remove(self, memory_cache):
        memory_cache.set("key", "value")
        memory_cache.remove("key")
        memory_cache.remove("never-set")

        assert memory_cache.get("key") is None

    def test_remove_by_pattern_is_case_insensitive(self, memory_cache):
        memory_cache.set("products:all", 1)
        memory_cache.set("Products:page:2", 2)
        memory_cache.set("customers:all", 3)

        removed = memory_cache.remove_by_pattern("PRODUCTS:")

        assert removed == 2
        assert memory_cache.get("customers:all") == 3
        assert len(memory_cache) == 1

    def test_clear(self, memory_cache):
        memory_cache.set("a", 1)
        memory_cache.set("b", 2)

        memory_cache.clear()

        assert len(memory_cache) == 0

    def test_invalidation_bumps_generation(self, memory_cache):
        start = memory_cache.generation

        memory_cache.remove_by_pattern("products:")
        memory_cache.remove("key")
        memory_cache.clear()

        assert memory_cache.generation == start + 3

    def test_set_with_current_generation_stores(self, memory_cache):
        generation = memory_cache.generation

        assert memory_cache.set("products:all", [1], generation=generation) is True
        assert memory_cache.get("products:all") == [1]

    def test_set_after_invalidation_is_skipped(self, memory_cache):
        """A value loaded before an invalidation must not be cached after it"""
        generation = memory_cache.generation
        memory_cache.remove_by_pattern("products:")

        stored = memory_cache.set("products:all", ["stale"], generation=generation)

        assert stored is False
        assert memory_cache.get("products:all") is None
