"""Cache port - Injectable caching abstraction.

The trip planner runs Dijkstra once per (metric, start vertex) and keeps
the predecessor map for later trips from the same start. This protocol
lets that memo be swapped for a bounded or a no-op implementation.
"""

from __future__ import annotations

from typing import Callable, Hashable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Testing
    """

    def get(self, key: Hashable) -> Optional[T]:
        """Get a value from the cache.

        Args:
            key: The cache key.

        Returns:
            The cached value, or None if not found.
        """
        ...

    def set(self, key: Hashable, value: T) -> None:
        """Set a value in the cache."""
        ...

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.
        """
        ...

    def clear(self) -> int:
        """Clear all entries, returning how many were removed."""
        ...

    def invalidate(self, key: Hashable) -> bool:
        """Remove one entry, returning True if it existed."""
        ...

    def size(self) -> int:
        ...
