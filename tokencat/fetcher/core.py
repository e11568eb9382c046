"""
Implements :class:`Core` that is used in other modules.
"""

from __future__ import annotations
import os
import threading
from functools import cached_property
from web3 import Web3
from tokencat.fetcher.caches import Cache, DEFAULT_CACHE_SIZE, MemoryCache, PersistentCache
from tokencat.fetcher.client import ERC20Client

#: File name of the persistent cache inside the data dir
CACHE_FILE_NAME = "token_cache.sqlite3"

web3_cache = {}
client_cache = {}
db_cache = {}
_registry_lock = threading.Lock()


class Core:
    """
    A base class for any class that wants to use
    an Ethereum RPC or a token cache.

    When deriving this class, you're providing arguments like rpc url
    or the data dir for the persistent cache. The resources are instantiated
    on demand though. It means that if you're only reading from a
    cache it's sufficient to skip the rpc endpoint in the constructor.

    So this class lightweight and safe to derive from any other
    class.

    **Cache selection**

    By default tokens are cached in process memory
    (:class:`tokencat.fetcher.caches.MemoryCache`). With ``persistent=True``
    they are stored in an sqlite3 file ``token_cache.sqlite3`` inside
    ``data_dir`` (:class:`tokencat.fetcher.caches.PersistentCache`),
    with ``cache_size`` most recently used entries kept in memory.

    **Environment**

    +-----------------------+----------------+---------------------------------+
    | Variable              | Argument       | Default                         |
    +=======================+================+=================================+
    | ``WEB3_PROVIDER_URI`` | ``rpc``        | none, remote calls are disabled |
    +-----------------------+----------------+---------------------------------+
    | ``WEB3_DATA_DIR``     | ``data_dir``   | none, required if persistent    |
    +-----------------------+----------------+---------------------------------+
    | ``WEB3_CACHE_SIZE``   | ``cache_size`` | 2048                            |
    +-----------------------+----------------+---------------------------------+

    Explicit arguments take precedence over the environment.

    **Sharing**

    The web3 instance and the :class:`tokencat.fetcher.client.ERC20Client`
    are shared by the rpc url key. The persistent cache is shared by
    the OS path of the database.

    Args:
        rpc: An https Ethereum RPC endpoint uri
        persistent: Use a persistent cache instead of the in-memory one
        data_dir: OS path to the directory for the persistent cache
        cache_size: Number of entries kept in memory
        w3: an instance of web3 (overrides rpc)
        cache: an instance of cache (overrides persistent, data_dir and cache_size)
        client: an instance of remote client (overrides w3 and rpc)
    """

    #: An https Ethereum RPC endpoint uri.
    #: Can be ``None`` if :class:`web3.Web3` is injected directly.
    rpc: str | None
    #: Use a persistent cache
    persistent: bool
    #: OS path to the directory for the persistent cache
    data_dir: str | None

    def __init__(
        self,
        rpc: str | None = None,
        persistent: bool = False,
        data_dir: str | None = None,
        cache_size: int | None = None,
        w3: Web3 | None = None,
        cache: Cache | None = None,
        client: ERC20Client | None = None,
    ):
        self.rpc = rpc
        self.persistent = persistent
        self.data_dir = data_dir
        self._cache_size = cache_size
        self._w3 = w3
        self._cache = cache
        self._client = client

    @cached_property
    def cache_size(self) -> int:
        """
        Number of cache entries kept in memory
        """
        if not self._cache_size is None:
            return self._cache_size
        env_value = os.environ.get("WEB3_CACHE_SIZE")
        if not env_value is None:
            return int(env_value)
        return DEFAULT_CACHE_SIZE

    @cached_property
    def w3(self) -> Web3 | None:
        """
        :class:`web3.Web3` instance for working with Ethereum RPC,
        ``None`` if the rpc is not set
        """
        if not self._w3 is None:
            return self._w3

        if self.rpc is None:
            self.rpc = os.environ.get("WEB3_PROVIDER_URI")

        if self.rpc is None:
            return None

        with _registry_lock:
            if not self.rpc in web3_cache:
                web3_cache[self.rpc] = Web3(Web3.HTTPProvider(self.rpc))
            return web3_cache[self.rpc]

    @cached_property
    def client(self) -> ERC20Client | None:
        """
        Remote client for reading token contracts, ``None`` if neither
        the client, web3 nor rpc is set
        """
        if not self._client is None:
            return self._client

        w3 = self.w3
        if w3 is None:
            return None

        if not self._w3 is None:
            return ERC20Client(w3)

        with _registry_lock:
            if not self.rpc in client_cache:
                client_cache[self.rpc] = ERC20Client(w3)
            return client_cache[self.rpc]

    @cached_property
    def cache(self) -> Cache:
        """
        Cache for encoded tokens
        """
        if not self._cache is None:
            return self._cache

        if not self.persistent:
            return MemoryCache(self.cache_size)

        if self.data_dir is None:
            self.data_dir = os.environ.get("WEB3_DATA_DIR")

        if self.data_dir is None:
            raise ValueError(
                "Data dir is not set. \
                Use `WEB3_DATA_DIR` env variable or pass data_dir explicitly"
            )

        path = os.path.join(self.data_dir, CACHE_FILE_NAME)
        with _registry_lock:
            if not path in db_cache:
                os.makedirs(self.data_dir, exist_ok=True)
                db_cache[path] = PersistentCache(path, self.cache_size)
            return db_cache[path]
