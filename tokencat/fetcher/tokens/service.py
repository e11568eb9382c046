from __future__ import annotations
import logging
from tokencat.fetcher.context import Context
from tokencat.fetcher.core import Core
from tokencat.fetcher.errors import FetchFailed, MalformedToken, NotConnected
from tokencat.fetcher.tokens.token import Token
from tokencat.fetcher.utils import canonical_address, short_address

logger = logging.getLogger(__name__)


class TokensService(Core):
    """
    Service for resolving ERC20 tokens metadata (symbol, decimals).

    The sole purpose of this service is to fetch ERC20 tokens metadata from web3,
    cache it, and read from the cache on subsequent calls.

    **Request/Response flow**

    ::

                    +---------------+                   +-------------+ +-------+
                    | TokensService |                   | ERC20Client | | Cache |
                    +---------------+                   +-------------+ +-------+
        ----------------  |                                    |            |
        | Resolve token |-|                                    |            |
        |---------------| |                                    |            |
                          |                                    |            |
                          | Find token by address              |            |
                          |------------------------------------------------>|
                          |                                    |            |
                          | If cache miss: fetch symbol        |            |
                          |----------------------------------->|            |
                          |                                    |            |
                          | If cache miss: fetch decimals      |            |
                          |----------------------------------->|            |
                          |                                    |            |
                          | Save token (errors are ignored)    |            |
                          |------------------------------------------------>|
               --------   |                                    |            |
               | Token |--|                                    |            |
               |-------|  |                                    |            |
                          |                                    |            |

    Cached tokens are never refreshed. Concurrent misses for the same address
    are not coalesced, each of them fetches and saves the token.

    Args:
        kwargs: Args for the :class:`tokencat.fetcher.core.Core`
    """

    @staticmethod
    def create(**kwargs) -> TokensService:
        """
        Create an instance of :class:`TokensService`

        Args:
            kwargs: Args for the :class:`tokencat.fetcher.core.Core`

        Returns:
            An instance of :class:`TokensService`
        """
        return TokensService(**kwargs)

    def resolve(self, ctx: Context, address: str | bytes) -> Token:
        """
        Get token metadata by address.

        Args:
            ctx: context for the remote calls
            address: token address, hex string in any case or 20 raw bytes

        Returns:
            An instance of :class:`Token`

        Raises:
            ValueError: ``address`` is not a valid address
            NotConnected: the token is not cached and there's no remote client
            FetchFailed: a remote call failed, was cancelled or timed out
        """
        key = canonical_address(address)
        token = self._get_from_cache(key)
        if not token is None:
            logger.debug("Cache hit for token %s", short_address(key))
            return token

        client = self.client
        if client is None:
            raise NotConnected()

        logger.info("Fetching token %s", short_address(key))
        try:
            symbol = client.symbol(ctx, key)
            if not isinstance(symbol, str):
                raise TypeError(f"expected a string, got `{symbol!r}`")
        except Exception as e:
            raise FetchFailed("symbol", key, e) from e
        try:
            decimals = int(client.decimals(ctx, key))
            if decimals < 0:
                raise ValueError(f"expected non-negative decimals, got {decimals}")
        except Exception as e:
            raise FetchFailed("decimals", key, e) from e

        token = Token(key, symbol, decimals)
        self._save_to_cache(key, token)
        return token

    def _get_from_cache(self, key: str) -> Token | None:
        data = self.cache.get(key)
        if data is None:
            return None
        try:
            return Token.decode(data)
        except MalformedToken as e:
            logger.warning("Ignoring malformed cache entry for %s: %s", key, e)
            return None

    def _save_to_cache(self, key: str, token: Token):
        try:
            self.cache.put(key, token.encode())
        except Exception:
            logger.warning("Failed to cache token %s", key, exc_info=True)
