"""Abstract base class for record caches.

The loader caches whole result lists by lookup key. There is no TTL and
no partial invalidation: entries live until ``clear`` is called.
"""

from abc import ABC, abstractmethod
from typing import Any


class Cache(ABC):
    """Abstract base class for cache implementations."""

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Get a value from the cache.

        Args:
            key: Lookup key (a server identity or the all-records sentinel).

        Returns:
            Cached value if present, None otherwise.
        """
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store a value in the cache, replacing any previous entry."""
        ...

    @abstractmethod
    def clear(self) -> int:
        """Drop every entry.

        Returns:
            Number of entries cleared.
        """
        ...
