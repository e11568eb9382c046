"""
Token metadata resolution with caching.
"""

from tokencat.fetcher.context import Context
from tokencat.fetcher.errors import FetchFailed, NotConnected, TokenError
from tokencat.fetcher.tokens import Token, TokensService
