"""
Caches for encoded tokens.

Every cache implements :class:`Cache`, i.e. has ``get`` and ``put``
methods. There are two of them:

+---------------------------------------------------------+-----------------------------+
| Cache                                                   | Description                 |
+=========================================================+=============================+
| :class:`tokencat.fetcher.caches.MemoryCache`            | LRU in process memory       |
+---------------------------------------------------------+-----------------------------+
| :class:`tokencat.fetcher.caches.PersistentCache`        | Sqlite3 file with LRU front |
+---------------------------------------------------------+-----------------------------+

Example:
    ::

        from tokencat.fetcher.caches import PersistentCache

        cache = PersistentCache("token_cache.sqlite3", size=1024)
        cache.put("key", b"value")
        cache.get("key")
        # => b"value"
"""

from tokencat.fetcher.caches.cache import Cache
from tokencat.fetcher.caches.memory import DEFAULT_CACHE_SIZE, MemoryCache
from tokencat.fetcher.caches.repo import CacheRepo
from tokencat.fetcher.caches.persistent import PersistentCache
