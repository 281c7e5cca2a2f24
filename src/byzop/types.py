from __future__ import annotations

from typing import Annotated, Literal, TypeAlias

from pydantic import AfterValidator
from web3 import Web3

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

ChainId: TypeAlias = Literal[1, 17000, 11155111]
"""
Chains with deployed Byzantine and Symbiotic contracts:

- ``1`` : Ethereum mainnet
- ``17000`` : Holesky
- ``11155111`` : Sepolia
"""


def is_valid_address(val: object) -> bool:
    """
    Whether ``val`` is a 20-byte hex address string.

    Mixed-case addresses must carry a valid EIP-55 checksum,
    all-lowercase and all-uppercase hex is accepted as is.
    """
    if not isinstance(val, str) or not Web3.is_address(val):
        return False
    body = val[2:] if val[:2] in ("0x", "0X") else val
    if body.islower() or body.isupper():
        return True
    return Web3.is_checksum_address(val)


def _is_address(val: str) -> str:
    assert isinstance(val, str), "Address must be a hex string"
    assert is_valid_address(val), f"{val} is not a valid ethereum address"
    return Web3.to_checksum_address(val)


ChecksumAddress: TypeAlias = Annotated[str, AfterValidator(_is_address)]
"""An ethereum address, normalized to its EIP-55 checksum form"""

OperatorIndex: TypeAlias = str | bytes
"""The ``bytes32`` id of a Native operator, as a ``0x`` hex string or raw bytes"""
