"""Thread-safe in-memory cache implementation.

Used by the trip planner to keep predecessor maps keyed by
(metric, start vertex), so trips sharing a start vertex run Dijkstra
only once.

- Thread-safe with RLock
- Optional size bound with oldest-first eviction
- Explicit invalidation
- Hit/miss statistics
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """Thread-safe in-memory cache.

    This cache implements the CachePort protocol.

    Attributes:
        max_size: Maximum number of entries (None = unlimited)
        name: Cache name for logging

    Example:
        cache = InMemoryCache[dict](name="shortest-paths", max_size=64)
        predecessors = cache.get_or_compute(
            ("distance", 0), lambda: road_map.find_shortest_paths(0, weight)
        )
    """

    max_size: Optional[int] = None
    name: str = "cache"

    _store: "OrderedDict[Hashable, Any]" = field(default_factory=OrderedDict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        if self.max_size is not None and self.max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {self.max_size}")
        self._logger = logging.getLogger(f"cache.{self.name}")

    def get(self, key: Hashable) -> Optional[T]:
        with self._lock:
            if key not in self._store:
                self._misses += 1
                return None
            self._hits += 1
            return self._store[key]

    def set(self, key: Hashable, value: T) -> None:
        """Set a value, evicting the oldest entry when the cache is full."""
        with self._lock:
            if (
                self.max_size is not None
                and key not in self._store
                and len(self._store) >= self.max_size
            ):
                oldest_key, _ = self._store.popitem(last=False)
                self._logger.debug(
                    "Cache evicted entry",
                    extra={"key": repr(oldest_key), "reason": "max_size"},
                )
            self._store[key] = value
            self._logger.debug("Cache entry set", extra={"key": repr(key)})

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.
        """
        with self._lock:
            if key in self._store:
                self._hits += 1
                self._logger.debug("Cache hit", extra={"key": repr(key)})
                return self._store[key]
            self._misses += 1

        # Compute outside the lock so a slow search does not block readers
        self._logger.debug("Cache miss, computing", extra={"key": repr(key)})
        computed = compute_fn()
        self.set(key, computed)
        return computed

    def clear(self) -> int:
        """Clear all entries and statistics.

        Returns:
            Number of entries that were cleared.
        """
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
            self._logger.info("Cache cleared", extra={"entries_cleared": count})
            return count

    def invalidate(self, key: Hashable) -> bool:
        with self._lock:
            if key in self._store:
                del self._store[key]
                self._logger.debug("Cache entry invalidated", extra={"key": repr(key)})
                return True
            return False

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss counts and size."""
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(hit_rate, 1),
            }

    def keys(self) -> List[Hashable]:
        with self._lock:
            return list(self._store.keys())
