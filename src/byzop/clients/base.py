from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from logging import Logger
from typing import Any, ClassVar, TypeVar

from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.contract import Contract

from byzop.contract import PendingTransaction, call_contract_method, execute_contract_method
from byzop.exceptions import ContractNotConfiguredError
from byzop.logging import init_logger
from byzop.networks import NetworkConfig, get_network_config
from byzop.types import ZERO_ADDRESS, ChainId

T = TypeVar("T")


class RegistryClient(ABC):
    """
    Abstract parent class for clients bound to a single deployed contract.

    Subclasses declare which :class:`.NetworkConfig` field holds their contract address
    and which ABI to use, and implement their public methods as one-line
    calls to :meth:`._call` or :meth:`._send`.
    """

    address_field: ClassVar[str]
    """Name of the :class:`.NetworkConfig` field with this contract's address"""
    abi: ClassVar[list[dict]]
    label: ClassVar[str]
    """Human readable contract name used in errors and logs"""

    def __init__(
        self,
        w3: Web3,
        chain_id: ChainId,
        account: LocalAccount | None = None,
        gas_price_gwei: float | None = None,
    ):
        self.w3 = w3
        self.chain_id = chain_id
        self.account = account
        self.gas_price_gwei = gas_price_gwei
        self.network: NetworkConfig = get_network_config(chain_id)
        self.contract: Contract = self._load_contract()
        self._logger: Logger = init_logger(f"clients.{type(self).__name__}")

    @property
    def address(self) -> str:
        """Address of the contract this client talks to"""
        return self.contract.address

    def _load_contract(self) -> Contract:
        address = getattr(self.network, self.address_field)
        if not address or address == ZERO_ADDRESS:
            raise ContractNotConfiguredError(
                f"{self.label} not configured for chain {self.chain_id}"
            )
        return self.w3.eth.contract(address=Web3.to_checksum_address(address), abi=self.abi)

    def _call(self, method: str, *args: Any, cast: Callable[[Any], T] | None = None) -> T | Any:
        self._logger.debug("call %s.%s%s", self.label, method, args)
        return call_contract_method(self.contract, method, *args, cast=cast)

    def _send(self, method: str, *args: Any) -> PendingTransaction:
        tx = execute_contract_method(
            self.contract,
            method,
            *args,
            account=self.account,
            chain_id=self.chain_id,
            gas_price_gwei=self.gas_price_gwei,
            network=self.network,
        )
        self._logger.info("Sent %s.%s: %s", self.label, method, tx.hash)
        return tx
