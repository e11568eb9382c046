import threading
from typing import Any, Dict, List, Tuple
import pytest

from tokencat.fetcher.client import ERC20Client


class ContractFunctionMock:
    def __init__(self, w3: "Web3Mock", address: str, name: str):
        self._w3 = w3
        self._address = address
        self._name = name

    def call(self) -> Any:
        self._w3.number_of_calls += 1
        self._w3.unblocked.wait(5)
        value = self._w3.responses[(self._address, self._name)]
        if isinstance(value, Exception):
            raise value
        return value


class ContractFunctionsMock:
    def __init__(self, w3: "Web3Mock", address: str):
        self._w3 = w3
        self._address = address

    def symbol(self) -> ContractFunctionMock:
        return ContractFunctionMock(self._w3, self._address, "symbol")

    def decimals(self) -> ContractFunctionMock:
        return ContractFunctionMock(self._w3, self._address, "decimals")


class ContractMock:
    def __init__(self, w3: "Web3Mock", address: str, abi: List[Dict[str, Any]]):
        self.address = address
        self.abi = abi
        self.functions = ContractFunctionsMock(w3, address)


class Web3Mock:
    """
    Mock instance of Web3 serving ERC20 calls from ``responses``.
    Calls block while ``unblocked`` is cleared.
    """

    responses: Dict[Tuple[str, str], Any]
    contracts: List[str]
    number_of_calls: int
    unblocked: threading.Event

    def __init__(self):
        self.responses = {}
        self.contracts = []
        self.number_of_calls = 0
        self.unblocked = threading.Event()
        self.unblocked.set()

    @property
    def eth(self):
        return self

    def contract(self, address: str, abi: List[Dict[str, Any]]) -> ContractMock:
        self.contracts.append(address)
        return ContractMock(self, address, abi)


@pytest.fixture
def w3_mock() -> Web3Mock:
    """
    Mock instance of Web3
    """
    w3 = Web3Mock()
    yield w3
    w3.unblocked.set()


@pytest.fixture
def erc20_client(w3_mock: Web3Mock) -> ERC20Client:
    """
    Instance of client.ERC20Client
    """
    client = ERC20Client(w3_mock)
    yield client
    client.close()
