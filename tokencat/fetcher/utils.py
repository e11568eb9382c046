"""
Utility functions.
"""

from __future__ import annotations
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address


def canonical_address(address: str | bytes) -> ChecksumAddress:
    """
    Canonical string form of an address (EIP-55 checksum).

    Args:
        address: hex address in any case or 20 raw bytes

    Returns:
        Checksummed address

    Raises:
        ValueError: if ``address`` is not a valid address

    Examples:
        ::

            print(canonical_address("0x6b175474e89094c44da98b954eedeac495271d0f"))
            # 0x6B175474E89094C44Da98b954EedeAC495271d0F
    """
    try:
        return to_checksum_address(address)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid address `{address!r}`") from e


def short_address(address: str) -> str:
    """
    Converts ethereum address to short version (for display purposes only).

    Args:
        address: Ethereum address to shorten

    Returns:
        Short version of the address.

    Examples:
        ::

            print(short_address("0x6B175474E89094C44Da98b954EedeAC495271d0F"))
            # 0x6B17...1d0F

    """
    return f"{address[:6]}...{address[38:]}"
