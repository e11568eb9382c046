from __future__ import annotations
import threading
from sqlite3 import Connection, Error as SqliteError
from tokencat.fetcher.db import connection_from_path
from tokencat.fetcher.caches.memory import DEFAULT_CACHE_SIZE, MemoryCache
from tokencat.fetcher.caches.repo import CacheRepo


class PersistentCache:
    """
    Cache stored in an sqlite3 database with an in-memory LRU in front.

    Reads go to memory first and fall back to the database, writes go to
    the database (committed immediately) and then to memory.
    Safe for concurrent use.

    Args:
        path: OS path to the database file
        size: number of entries kept in memory
        conn: an instance of database connection (overrides path)
    """

    _repo: CacheRepo
    _memory: MemoryCache
    _lock: threading.Lock

    def __init__(
        self,
        path: str | None = None,
        size: int = DEFAULT_CACHE_SIZE,
        conn: Connection | None = None,
    ):
        if conn is None:
            if path is None:
                raise ValueError("Either path or conn must be set")
            conn = connection_from_path(path)
        self._repo = CacheRepo(conn)
        self._memory = MemoryCache(size)
        self._lock = threading.Lock()

    def get(self, key: str) -> bytes | None:
        value = self._memory.get(key)
        if not value is None:
            return value
        with self._lock:
            value = self._repo.find(key)
        if not value is None:
            self._memory.put(key, value)
        return value

    def put(self, key: str, value: bytes):
        with self._lock:
            try:
                self._repo.save(key, value)
                self._repo.commit()
            except SqliteError:
                self._repo.rollback()
                raise
        self._memory.put(key, value)

    def close(self):
        """
        Close the database connection
        """
        with self._lock:
            self._repo.conn.close()
