"""Storage backends for catalog data.

This module provides:
- CatalogStorage: Abstract base class for manifest and evaluation storage
- FileManager: File-based storage implementation
- Cache: Abstract base class for record caches
- MemoryCache: Process-wide in-memory cache
"""

from src.storage.cache.base import Cache
from src.storage.cache.memory_cache import MemoryCache
from src.storage.permanent_storage.base import CatalogStorage, ManifestError
from src.storage.permanent_storage.file_manager import FileManager

__all__ = [
    "Cache",
    "CatalogStorage",
    "FileManager",
    "ManifestError",
    "MemoryCache",
]
