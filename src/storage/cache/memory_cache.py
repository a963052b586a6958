"""Process-wide in-memory cache."""

import logging
import threading
from typing import Any

from src.storage.cache.base import Cache

logger = logging.getLogger(__name__)


class MemoryCache(Cache):
    """Dictionary-backed cache guarded by a lock.

    The API serves sync endpoints from a thread pool, so concurrent
    readers and writers share one instance.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = value

    def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        if count:
            logger.debug(f"Cleared {count} cache entries")
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries
