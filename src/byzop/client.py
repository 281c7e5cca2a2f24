"""
Unified operator client.

:class:`.ByzOperatorClient` bundles one client per contract for a single chain,
and exposes their methods under protocol-prefixed names.

Example:
    >>> from eth_account import Account
    >>> from web3 import Web3
    >>> from byzop import ByzOperatorClient
    >>>
    >>> w3 = Web3(Web3.HTTPProvider("https://ethereum-holesky-rpc.publicnode.com"))
    >>> client = ByzOperatorClient(w3, chain_id=17000, account=Account.from_key("0x..."))
    >>>
    >>> # Symbiotic: register, then opt into a network and a vault
    >>> client.register_operator().wait()
    >>> client.opt_in_network("0xNetwork...").wait()
    >>> client.opt_in_vault("0xVault...").wait()
    >>>
    >>> # Native: register with an 8% fee
    >>> tx = client.register_native_operator("my-operator", client.address, 800, [client.address])
    >>> tx.wait()
    >>> operator_index = client.get_native_operator_id("my-operator")
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Self

from eth_account import Account
from eth_account.signers.local import LocalAccount
from pydantic import BaseModel, Field
from web3 import Web3

from byzop.clients import (
    NativeOperatorRegistry,
    OperatorNetworkOptInService,
    OperatorRegistry,
    OperatorVaultOptInService,
)
from byzop.config import Config
from byzop.contract import PendingTransaction, validate_address
from byzop.exceptions import ConfigError
from byzop.logging import init_logger
from byzop.networks import NetworkConfig, get_network_config
from byzop.types import ChainId, OperatorIndex


class OperatorStatus(BaseModel):
    """Read-only snapshot of an address's Symbiotic registration and opt-ins"""

    address: str
    chain_id: int
    is_symbiotic_operator: bool
    total_symbiotic_operators: int
    networks: dict[str, bool] = Field(default_factory=dict)
    """Opt-in state per queried network address"""
    vaults: dict[str, bool] = Field(default_factory=dict)
    """Opt-in state per queried vault address"""


class ByzOperatorClient:
    """
    Register operators and manage their network and vault opt-ins
    in the Native and Symbiotic ecosystems.

    Read methods return decoded values.
    Write methods return a :class:`.PendingTransaction` as soon as the transaction is broadcast,
    and raise :class:`.SignerMissingError` if the client was created without an account.

    Args:
        w3: Connected web3 instance
        chain_id: One of the chains in :data:`.NETWORKS`
        account: Local account used to sign transactions. May be omitted for read-only use.
        gas_price_gwei: Use a fixed legacy gas price for all transactions
    """

    def __init__(
        self,
        w3: Web3,
        chain_id: ChainId,
        account: LocalAccount | None = None,
        gas_price_gwei: float | None = None,
    ):
        # fails early for unsupported chains, before any contract is built
        self.network: NetworkConfig = get_network_config(chain_id)
        self.chain_id = chain_id
        self.w3 = w3
        self.account = account
        self._logger = init_logger("client")

        kwargs = {"account": account, "gas_price_gwei": gas_price_gwei}
        self.native_registry = NativeOperatorRegistry(w3, chain_id, **kwargs)
        self.sym_operator_registry = OperatorRegistry(w3, chain_id, **kwargs)
        self.sym_network_opt_in = OperatorNetworkOptInService(w3, chain_id, **kwargs)
        self.sym_vault_opt_in = OperatorVaultOptInService(w3, chain_id, **kwargs)

    @classmethod
    def from_config(cls, config: Config | None = None) -> Self:
        """
        Create a client from :class:`.Config` : connect to ``rpc_url``
        and load the account from ``private_key`` or, failing that, ``mnemonic``.
        """
        if config is None:
            config = Config()
        if not config.rpc_url:
            raise ConfigError("No rpc_url configured (set BYZOP_RPC_URL)")

        w3 = Web3(Web3.HTTPProvider(config.rpc_url))
        if not w3.is_connected():
            raise ConnectionError(f"Failed to connect to {config.rpc_url}")

        account = None
        if config.private_key is not None:
            account = Account.from_key(config.private_key.get_secret_value())
        elif config.mnemonic is not None:
            Account.enable_unaudited_hdwallet_features()
            account = Account.from_mnemonic(config.mnemonic.get_secret_value())

        return cls(w3, config.chain_id, account=account, gas_price_gwei=config.gas_price_gwei)

    @property
    def address(self) -> str | None:
        """Address of the signing account, if any"""
        return self.account.address if self.account is not None else None

    # --------------------------------------------------
    # Symbiotic
    # --------------------------------------------------

    def register_operator(self) -> PendingTransaction:
        """
        Register as an operator in the Symbiotic ecosystem.

        This is the first step of Symbiotic operator onboarding,
        and must happen before opting into networks or vaults.
        """
        return self.sym_operator_registry.register_operator()

    def is_operator(self, operator_address: str) -> bool:
        return self.sym_operator_registry.is_operator(operator_address)

    def get_total_operators(self) -> int:
        return self.sym_operator_registry.get_total_operators()

    def get_operator_at_index(self, index: int) -> str:
        return self.sym_operator_registry.get_operator_at_index(index)

    def opt_in_network(self, network_address: str) -> PendingTransaction:
        """Indicate intention to validate for a network"""
        return self.sym_network_opt_in.opt_in(network_address)

    def opt_out_network(self, network_address: str) -> PendingTransaction:
        return self.sym_network_opt_in.opt_out(network_address)

    def is_opted_in_network(self, operator_address: str, network_address: str) -> bool:
        return self.sym_network_opt_in.is_opted_in(operator_address, network_address)

    def opt_in_vault(self, vault_address: str) -> PendingTransaction:
        """Allow a vault to allocate stake to this operator"""
        return self.sym_vault_opt_in.opt_in(vault_address)

    def opt_out_vault(self, vault_address: str) -> PendingTransaction:
        return self.sym_vault_opt_in.opt_out(vault_address)

    def is_opted_in_vault(self, operator_address: str, vault_address: str) -> bool:
        return self.sym_vault_opt_in.is_opted_in(operator_address, vault_address)

    # --------------------------------------------------
    # Native
    # --------------------------------------------------

    def register_native_operator(
        self, name: str, admin: str, operator_fee: int, managers: Sequence[str]
    ) -> PendingTransaction:
        """See :meth:`.NativeOperatorRegistry.register_operator`"""
        return self.native_registry.register_operator(name, admin, operator_fee, managers)

    def unregister_native_operator(self, operator_index: OperatorIndex) -> PendingTransaction:
        return self.native_registry.unregister_operator(operator_index)

    def is_native_operator_registered(self, name: str) -> bool:
        return self.native_registry.is_operator_registered(name)

    def get_native_operator_id(self, name: str) -> str:
        return self.native_registry.get_operator_id(name)

    def get_native_operator_admin(self, operator_index: OperatorIndex) -> str:
        return self.native_registry.get_operator_admin(operator_index)

    def get_native_operator_fee(self, operator_index: OperatorIndex) -> int:
        return self.native_registry.get_operator_fee(operator_index)

    def is_native_manager_of_operator(self, operator_index: OperatorIndex, address: str) -> bool:
        return self.native_registry.is_manager_of_operator(operator_index, address)

    def set_native_operator_manager(
        self, operator_index: OperatorIndex, managers: Sequence[str], is_manager: bool
    ) -> PendingTransaction:
        return self.native_registry.set_operator_manager(operator_index, managers, is_manager)

    def transfer_native_admin_role(
        self, operator_index: OperatorIndex, new_admin: str
    ) -> PendingTransaction:
        return self.native_registry.transfer_admin_role(operator_index, new_admin)

    def update_native_operator_fee(
        self, operator_index: OperatorIndex, operator_fee: int
    ) -> PendingTransaction:
        return self.native_registry.update_operator_fee(operator_index, operator_fee)

    # --------------------------------------------------
    # Utility
    # --------------------------------------------------

    def get_network_config(self) -> NetworkConfig:
        return self.network

    def get_operator_status(
        self,
        address: str | None = None,
        networks: Sequence[str] = (),
        vaults: Sequence[str] = (),
    ) -> OperatorStatus:
        """
        Collect the Symbiotic registration and opt-in state of an operator.

        Args:
            address: Operator to inspect. Defaults to the signing account.
            networks: Network addresses to check opt-ins for
            vaults: Vault addresses to check opt-ins for
        """
        if address is None:
            if self.account is None:
                raise ConfigError("No address specified and no account configured")
            address = self.account.address
        address = validate_address(address, "operator address")

        status = OperatorStatus(
            address=address,
            chain_id=self.chain_id,
            is_symbiotic_operator=self.is_operator(address),
            total_symbiotic_operators=self.get_total_operators(),
            networks={
                validate_address(n): self.is_opted_in_network(address, n) for n in networks
            },
            vaults={validate_address(v): self.is_opted_in_vault(address, v) for v in vaults},
        )
        self._logger.debug("Operator status: %s", status)
        return status
