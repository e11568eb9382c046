from __future__ import annotations
import threading
from cachetools import LRUCache

#: Default number of entries kept in memory
DEFAULT_CACHE_SIZE = 2048


class MemoryCache:
    """
    In-memory LRU cache.

    When the cache is full, the least recently used entry is evicted.
    Safe for concurrent use.

    Args:
        size: maximum number of entries
    """

    _lru: LRUCache
    _lock: threading.Lock

    def __init__(self, size: int = DEFAULT_CACHE_SIZE):
        if size <= 0:
            raise ValueError(f"Cache size must be positive, got {size}")
        self._lru = LRUCache(maxsize=size)
        self._lock = threading.Lock()

    @property
    def size(self) -> int:
        """
        Maximum number of entries
        """
        return int(self._lru.maxsize)

    def get(self, key: str) -> bytes | None:
        with self._lock:
            return self._lru.get(key)

    def put(self, key: str, value: bytes):
        with self._lock:
            self._lru[key] = value

    def __len__(self) -> int:
        with self._lock:
            return len(self._lru)
