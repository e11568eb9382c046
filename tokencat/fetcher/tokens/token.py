from __future__ import annotations
import json
from typing import Any, Dict
from eth_typing import ChecksumAddress
from eth_utils import to_canonical_address
from tokencat.fetcher.errors import MalformedToken
from tokencat.fetcher.utils import canonical_address

_FIELDS = {"address", "symbol", "decimals"}


class Token:
    """
    ERC20 token metadata (symbol, decimals).

    The fields are read-only. ``address`` is the checksummed address
    which is also the key of the token in a cache.

    Args:
        address: token address, hex string in any case or 20 raw bytes
        symbol: token symbol, may be empty
        decimals: non-negative number of decimals
    """

    _address: ChecksumAddress
    _symbol: str
    _decimals: int

    def __init__(self, address: str | bytes, symbol: str, decimals: int):
        if not isinstance(symbol, str):
            raise TypeError(f"Token symbol must be a string, got `{symbol!r}`")
        if isinstance(decimals, bool) or not isinstance(decimals, int):
            raise TypeError(f"Token decimals must be an integer, got `{decimals!r}`")
        if decimals < 0:
            raise ValueError(f"Token decimals must be non-negative, got {decimals}")
        self._address = canonical_address(address)
        self._symbol = symbol
        self._decimals = decimals

    @property
    def address(self) -> ChecksumAddress:
        """
        Token address (checksummed)
        """
        return self._address

    @property
    def address_bytes(self) -> bytes:
        """
        Token address as 20 raw bytes
        """
        return to_canonical_address(self._address)

    @property
    def symbol(self) -> str:
        """
        Token symbol
        """
        return self._symbol

    @property
    def decimals(self) -> int:
        """
        Token decimals
        """
        return self._decimals

    def encode(self) -> bytes:
        """
        Serialize to bytes.

        The output is deterministic: the same token always encodes
        to the same bytes.
        """
        return json.dumps(
            self.to_dict(), sort_keys=True, separators=(",", ":"), ensure_ascii=True
        ).encode("utf-8")

    @staticmethod
    def decode(data: bytes) -> Token:
        """
        Deserialize from bytes produced by :meth:`encode`

        Args:
            data: encoded token

        Raises:
            MalformedToken: if ``data`` is not a valid encoded token
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise MalformedToken(f"Expected bytes, got {type(data).__name__}")
        try:
            dct = json.loads(bytes(data).decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as e:
            raise MalformedToken(f"Can't parse token: {e}") from e
        if not isinstance(dct, dict) or set(dct.keys()) != _FIELDS:
            raise MalformedToken(f"Unexpected token fields in `{dct!r}`")
        if not isinstance(dct["address"], str):
            raise MalformedToken(f"Unexpected token address `{dct['address']!r}`")
        try:
            return Token.from_dict(dct)
        except (TypeError, ValueError) as e:
            raise MalformedToken(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert :class:`Token` to dict
        """
        return {
            "address": self._address,
            "symbol": self._symbol,
            "decimals": self._decimals,
        }

    @staticmethod
    def from_dict(dct: Dict[str, Any]) -> Token:
        """
        Create :class:`Token` from dict
        """
        return Token(
            address=dct["address"],
            symbol=dct["symbol"],
            decimals=dct["decimals"],
        )

    def __eq__(self, other):
        if type(other) is type(self):
            return self.to_dict() == other.to_dict()
        return False

    def __hash__(self):
        return hash((self._address, self._symbol, self._decimals))

    def __repr__(self):
        return f"Token({json.dumps(self.to_dict())})"
