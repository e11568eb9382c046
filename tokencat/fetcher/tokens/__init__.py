"""
Module for resolving and caching ERC20 tokens metadata
(symbol, decimals).

The main class of this module is :class:`TokensService`.
It serves token metadata from a cache or fetches it
directly from the blockchain and caches it.

Example:
    ::

        from tokencat.fetcher.context import Context
        from tokencat.fetcher.tokens import TokensService

        service = TokensService.create(rpc="https://eth.llamarpc.com")
        dai = service.resolve(Context(timeout=10), "0x6b175474e89094c44da98b954eedeac495271d0f")
        # => Token({"address": "0x6B175474E89094C44Da98b954EedeAC495271d0F", "symbol": "DAI", "decimals": 18})
        dai = service.resolve(Context(timeout=10), "0x6B175474E89094C44Da98b954EedeAC495271d0F")
        # => serving from cache
"""

from tokencat.fetcher.tokens.token import Token
from tokencat.fetcher.tokens.service import TokensService
