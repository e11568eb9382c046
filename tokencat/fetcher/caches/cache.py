from __future__ import annotations
from typing import Protocol


class Cache(Protocol):
    """
    Key/value store for encoded tokens.

    Any object with these two methods can be used as a cache,
    see :class:`MemoryCache` and :class:`PersistentCache`.
    """

    def get(self, key: str) -> bytes | None:
        """
        Get value by key

        Returns:
            Stored bytes or ``None`` if the key is not present
        """
        ...

    def put(self, key: str, value: bytes):
        """
        Store ``value`` under ``key``
        """
        ...
