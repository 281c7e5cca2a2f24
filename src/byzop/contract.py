"""
Generic helpers for calling and transacting with contracts,
and the argument checks shared by every client.

Anything raised by web3 (reverts during estimation, insufficient funds,
timeouts, connection errors) propagates to the caller untouched.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

from eth_account.signers.local import LocalAccount
from hexbytes import HexBytes
from web3 import Web3
from web3.contract import Contract
from web3.types import TxParams, TxReceipt

from byzop.exceptions import (
    InvalidAddressError,
    InvalidOperatorFeeError,
    InvalidOperatorIndexError,
    InvalidOperatorNameError,
    SignerMissingError,
    TransactionRevertedError,
)
from byzop.types import is_valid_address

if TYPE_CHECKING:
    from byzop.networks import NetworkConfig

T = TypeVar("T")

MAX_OPERATOR_FEE = 1000
"""Operator fees are in basis points, capped at 10%"""


@dataclass
class PendingTransaction:
    """
    A broadcast, possibly not yet mined, transaction.

    Returned by every state-changing client method.
    Call :meth:`.wait` to block until it is mined.
    """

    hash: str
    """``0x``-prefixed transaction hash"""
    method: str
    """Name of the contract function that was called"""
    chain_id: int
    w3: Web3 = field(repr=False)
    network: NetworkConfig | None = field(default=None, repr=False)

    @property
    def explorer_url(self) -> str | None:
        if self.network is None:
            return None
        return self.network.tx_url(self.hash)

    def wait(self, timeout: float = 120, poll_latency: float = 0.1) -> TxReceipt:
        """
        Wait for the transaction to be mined.

        Raises:
            :class:`.TransactionRevertedError` if the transaction was mined but reverted
            :class:`web3.exceptions.TimeExhausted` if not mined within ``timeout`` seconds
        """
        receipt = self.w3.eth.wait_for_transaction_receipt(
            self.hash, timeout=timeout, poll_latency=poll_latency
        )
        if receipt["status"] != 1:
            raise TransactionRevertedError(
                f"{self.method} reverted in block {receipt['blockNumber']}: {self.hash}"
            )
        return receipt


def call_contract_method(
    contract: Contract,
    method: str,
    *args: Any,
    cast: Callable[[Any], T] | None = None,
) -> T | Any:
    """
    Call a read-only contract function.

    Args:
        contract: The contract to call
        method: Name of the function in the contract's ABI
        *args: Positional arguments to the function
        cast: Optional converter applied to the decoded return value

    Returns:
        The decoded return value, passed through ``cast`` if given
    """
    result = getattr(contract.functions, method)(*args).call()
    if cast is not None:
        result = cast(result)
    return result


def execute_contract_method(
    contract: Contract,
    method: str,
    *args: Any,
    account: LocalAccount | None,
    chain_id: int,
    gas_price_gwei: float | None = None,
    network: NetworkConfig | None = None,
) -> PendingTransaction:
    """
    Build, sign and broadcast a state-changing contract call.

    Gas is estimated and (unless ``gas_price_gwei`` is given) fees are filled in
    by web3 when the transaction is built. Does not wait for the transaction to be mined.

    Args:
        contract: The contract to transact with
        method: Name of the function in the contract's ABI
        *args: Positional arguments to the function
        account: Local account used to sign the transaction
        chain_id: Chain id included in the signed transaction
        gas_price_gwei: Use a fixed legacy gas price instead of EIP-1559 fees
        network: Used to build explorer links on the returned transaction

    Returns:
        :class:`.PendingTransaction`

    Raises:
        :class:`.SignerMissingError` if ``account`` is ``None``
    """
    if account is None:
        raise SignerMissingError(f"A signer is required to call {method}")

    w3 = contract.w3
    tx: TxParams = {
        "from": account.address,
        "nonce": w3.eth.get_transaction_count(account.address, "pending"),
        "chainId": chain_id,
    }
    if gas_price_gwei is not None:
        tx["gasPrice"] = Web3.to_wei(gas_price_gwei, "gwei")

    tx = getattr(contract.functions, method)(*args).build_transaction(tx)
    signed = account.sign_transaction(tx)
    tx_hash = w3.eth.send_raw_transaction(signed.raw_transaction)

    return PendingTransaction(
        hash=Web3.to_hex(tx_hash), method=method, chain_id=chain_id, w3=w3, network=network
    )


# --------------------------------------------------
# Argument validation
# --------------------------------------------------


def validate_address(value: Any, label: str = "address") -> str:
    """
    Check that ``value`` is a well-formed address and return its checksum form.

    Mixed-case addresses must have a valid EIP-55 checksum.
    """
    if not is_valid_address(value):
        raise InvalidAddressError(f"Invalid {label}: {value!r}")
    return Web3.to_checksum_address(value)


def validate_addresses(values: Sequence[Any], label: str = "address") -> list[str]:
    if isinstance(values, str | bytes):
        raise InvalidAddressError(f"Expected a list of {label}es, got {values!r}")
    return [validate_address(v, label) for v in values]


def validate_operator_name(name: Any) -> str:
    if not isinstance(name, str) or name.strip() == "":
        raise InvalidOperatorNameError("Operator name cannot be empty")
    return name


def validate_operator_fee(fee: Any) -> int:
    # bools are ints, but True is never a meaningful fee
    if isinstance(fee, bool) or not isinstance(fee, int):
        raise InvalidOperatorFeeError(f"Operator fee must be an integer, got {fee!r}")
    if fee < 0 or fee > MAX_OPERATOR_FEE:
        raise InvalidOperatorFeeError(
            f"Operator fee must be between 0 and {MAX_OPERATOR_FEE} (0% and 10%), got {fee}"
        )
    return fee


def validate_operator_index(index: Any) -> bytes:
    """
    Convert a ``bytes32`` operator index given as hex string or bytes to 32 raw bytes
    """
    if not isinstance(index, str | bytes):
        raise InvalidOperatorIndexError(f"Operator index must be hex or bytes, got {index!r}")
    try:
        value = bytes(HexBytes(index))
    except ValueError as e:
        raise InvalidOperatorIndexError(f"Operator index is not valid hex: {index!r}") from e
    if len(value) != 32:
        raise InvalidOperatorIndexError(
            f"Operator index must be 32 bytes, got {len(value)}: {index!r}"
        )
    return value
