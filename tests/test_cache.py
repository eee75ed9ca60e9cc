"""Unit tests for the completion cache."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from codeassist.completion import CompletionCache


class TestCompletionCache:
    """Tests for CompletionCache."""

    def test_miss_returns_none(self):
        cache = CompletionCache()
        assert cache.lookup("os.") is None
        assert cache.stats.misses == 1

    def test_store_then_lookup(self):
        """Test that stored suggestions come back in order."""
        cache = CompletionCache()
        cache.store("os.", ["path", "getcwd()", "environ"])

        assert cache.lookup("os.") == ["path", "getcwd()", "environ"]
        assert cache.stats.hits == 1

    def test_empty_list_is_a_hit(self):
        """Test that an empty suggestion list is distinct from a miss."""
        cache = CompletionCache()
        cache.store("x = ", [])

        assert cache.lookup("x = ") == []
        assert "x = " in cache

    def test_keys_are_not_normalized(self):
        cache = CompletionCache()
        cache.store("foo(", ["a"])

        assert cache.lookup("foo( ") is None

    def test_lookup_returns_copy(self):
        """Test that callers cannot mutate cached entries."""
        cache = CompletionCache()
        cache.store("k", ["a"])
        cache.lookup("k").append("b")

        assert cache.lookup("k") == ["a"]

    def test_store_replaces_existing(self):
        cache = CompletionCache()
        cache.store("k", ["a"])
        cache.store("k", ["b"])

        assert cache.lookup("k") == ["b"]
        assert len(cache) == 1

    def test_evicts_least_recently_used(self):
        cache = CompletionCache(capacity=2)
        cache.store("a", ["1"])
        cache.store("b", ["2"])
        cache.lookup("a")
        cache.store("c", ["3"])

        assert "a" in cache
        assert "b" not in cache
        assert "c" in cache
        assert cache.stats.evictions == 1

    def test_invalid_capacity(self):
        with pytest.raises(ValueError, match="capacity"):
            CompletionCache(capacity=0)

    def test_clear_resets_entries_and_stats(self):
        cache = CompletionCache()
        cache.store("k", ["a"])
        cache.lookup("k")
        cache.clear()

        assert len(cache) == 0
        assert cache.stats.hits == 0
        assert cache.stats.hit_rate == 0.0

    def test_hit_rate(self):
        cache = CompletionCache()
        cache.store("k", ["a"])
        cache.lookup("k")
        cache.lookup("missing")

        assert cache.stats.hit_rate == 0.5

    @given(
        st.integers(min_value=1, max_value=8),
        st.lists(st.text(max_size=5), max_size=40),
    )
    def test_size_never_exceeds_capacity(self, capacity: int, keys: list[str]):
        """Property test: the cache stays bounded and keeps the newest key."""
        cache = CompletionCache(capacity=capacity)
        for key in keys:
            cache.store(key, [key])
            assert len(cache) <= capacity

        if keys:
            assert cache.lookup(keys[-1]) == [keys[-1]]
