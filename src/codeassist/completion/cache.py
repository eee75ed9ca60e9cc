"""Completion cache.

Memoizes suggestions keyed by the exact truncated context string so an
unchanged prefix never costs a second remote call. Keys are not
normalized: whitespace differences are different requests.

Entries are bounded by least-recently-used eviction. The cache is not
locked; it is only touched from the event loop thread.
"""

from collections import OrderedDict
from dataclasses import dataclass

DEFAULT_CACHE_CAPACITY = 256


@dataclass
class CacheStats:
    """Hit/miss counters for a completion cache."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


class CompletionCache:
    """LRU map from truncated context to an ordered list of suggestions.

    Suggestion order is the model's relevance order and is preserved.
    Concurrent misses for the same key are not coalesced; both callers
    go to the remote endpoint and the later store wins.
    """

    def __init__(self, capacity: int = DEFAULT_CACHE_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._entries: OrderedDict[str, tuple[str, ...]] = OrderedDict()
        self._stats = CacheStats()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def stats(self) -> CacheStats:
        return self._stats

    def lookup(self, key: str) -> list[str] | None:
        """Return cached suggestions for ``key``, or None on a miss."""
        entry = self._entries.get(key)
        if entry is None:
            self._stats.misses += 1
            return None
        self._entries.move_to_end(key)
        self._stats.hits += 1
        return list(entry)

    def store(self, key: str, suggestions: list[str]) -> None:
        """Store suggestions for ``key``, evicting the least recently used entry if full."""
        self._entries[key] = tuple(suggestions)
        self._entries.move_to_end(key)
        while len(self._entries) > self._capacity:
            self._entries.popitem(last=False)
            self._stats.evictions += 1

    def clear(self) -> None:
        """Drop every entry and reset the counters."""
        self._entries.clear()
        self._stats = CacheStats()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
