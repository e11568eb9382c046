from __future__ import annotations
import json
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List
from web3 import Web3
from web3.contract import Contract
from tokencat.fetcher.context import Context
from tokencat.fetcher.utils import canonical_address

#: Default number of worker threads for remote calls
DEFAULT_MAX_WORKERS = 8


class ERC20Client:
    """
    Read-only calls to ERC20 contracts.

    Every call is scoped to a :class:`tokencat.fetcher.context.Context`.
    A call is not started if the context is already done. A started call
    runs on a worker thread and the caller stops waiting for it as soon
    as the context is cancelled or its deadline passes.

    Args:
        w3: an instance of web3
        max_workers: number of worker threads for remote calls
    """

    _w3: Web3
    _erc20_abi: List[Dict[str, Any]]
    _executor: ThreadPoolExecutor

    def __init__(self, w3: Web3, max_workers: int = DEFAULT_MAX_WORKERS):
        self._w3 = w3
        current_folder = os.path.realpath(os.path.dirname(__file__))
        with open(f"{current_folder}/erc20_abi.json", "r", encoding="utf-8") as f:
            self._erc20_abi = json.load(f)
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="tokencat-rpc"
        )

    def symbol(self, ctx: Context, address: str | bytes) -> str:
        """
        Call ``symbol()`` on the token contract

        Args:
            ctx: context for the call
            address: token address

        Returns:
            Token symbol
        """
        return self._call(ctx, self._contract(address).functions.symbol())

    def decimals(self, ctx: Context, address: str | bytes) -> int:
        """
        Call ``decimals()`` on the token contract

        Args:
            ctx: context for the call
            address: token address

        Returns:
            Token decimals
        """
        return int(self._call(ctx, self._contract(address).functions.decimals()))

    def close(self):
        """
        Stop the worker threads
        """
        self._executor.shutdown(wait=False, cancel_futures=True)

    def _contract(self, address: str | bytes) -> Contract:
        return self._w3.eth.contract(
            address=canonical_address(address), abi=self._erc20_abi
        )

    def _call(self, ctx: Context, function: Any) -> Any:
        ctx.raise_if_done()
        future = self._executor.submit(function.call)
        return ctx.wait(future)

    def __enter__(self) -> ERC20Client:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
