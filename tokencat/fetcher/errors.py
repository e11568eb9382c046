"""
Errors raised by the :mod:`tokencat.fetcher` services.
"""

from __future__ import annotations


class TokenError(Exception):
    """
    Base class for token resolution errors
    """


class NotConnected(TokenError):
    """
    Raised when a token is not cached and there's no remote client
    to fetch it from.
    """

    def __init__(self, message: str = "not connected to a chain, set rpc or WEB3_PROVIDER_URI"):
        super().__init__(message)


class FetchFailed(TokenError):
    """
    Raised when a remote call for a token field failed.

    Args:
        field: name of the field that failed (``symbol`` or ``decimals``)
        address: token address
        cause: the underlying transport, contract or context error
    """

    #: Name of the failed field
    field: str
    #: Token address
    address: str
    #: Underlying error
    cause: BaseException

    def __init__(self, field: str, address: str, cause: BaseException):
        super().__init__(f"getting token {address}: reading {field}: {cause}")
        self.field = field
        self.address = address
        self.cause = cause


class MalformedToken(TokenError):
    """
    Raised when bytes can't be decoded into a :class:`tokencat.fetcher.tokens.Token`
    """
