"""Null cache implementation for testing.

This cache always misses, so every trip re-runs the shortest-path search.
Use it in tests that count searches or must not share state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")


@dataclass
class NullCache(Generic[T]):
    """No-op cache - always misses.

    Implements the CachePort protocol but never stores anything.
    """

    name: str = "null"

    def get(self, key: Hashable) -> Optional[T]:
        return None

    def set(self, key: Hashable, value: T) -> None:
        pass

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        """Always calls ``compute_fn``."""
        return compute_fn()

    def clear(self) -> int:
        return 0

    def invalidate(self, key: Hashable) -> bool:
        return False

    def size(self) -> int:
        return 0
