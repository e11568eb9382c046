"""
Fetcher module fetches token metadata from web3 and
caches it for subsequent queries.

+------------------------------------------------------+-------------------------------+
| Class                                                | Description                   |
+======================================================+===============================+
| :class:`tokencat.fetcher.tokens.TokensService`       | Resolving token metadata      |
|                                                      | (symbol, decimals)            |
+------------------------------------------------------+-------------------------------+
| :class:`tokencat.fetcher.client.ERC20Client`         | Read-only calls to ERC20      |
|                                                      | contracts                     |
+------------------------------------------------------+-------------------------------+
| :class:`tokencat.fetcher.caches.MemoryCache`         | In-memory LRU cache           |
+------------------------------------------------------+-------------------------------+
| :class:`tokencat.fetcher.caches.PersistentCache`     | Sqlite3 cache                 |
+------------------------------------------------------+-------------------------------+
| :class:`tokencat.fetcher.context.Context`            | Cancellation and deadlines    |
+------------------------------------------------------+-------------------------------+

The best way to get started is to explore these classes and module
docs.
"""
