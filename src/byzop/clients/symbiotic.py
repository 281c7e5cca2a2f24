"""
Clients for the Symbiotic operator registry and opt-in services.

The usual flow for a new Symbiotic operator is:

1. Register in the :class:`.OperatorRegistry`
2. Opt into the networks it wants to validate for (:class:`.OperatorNetworkOptInService`)
3. Opt into the vaults it wants to receive stake from (:class:`.OperatorVaultOptInService`)

Stake allocation and network activation are then handled by vault curators
and networks, outside of this SDK.
"""

from web3 import Web3

from byzop.abi import (
    NETWORK_OPT_IN_SERVICE_ABI,
    SYMBIOTIC_OPERATOR_REGISTRY_ABI,
    VAULT_OPT_IN_SERVICE_ABI,
)
from byzop.clients.base import RegistryClient
from byzop.contract import PendingTransaction, validate_address
from byzop.exceptions import InvalidOperatorIndexError


class OperatorRegistry(RegistryClient):
    address_field = "operator_registry"
    abi = SYMBIOTIC_OPERATOR_REGISTRY_ABI
    label = "Symbiotic Operator Registry"

    def register_operator(self) -> PendingTransaction:
        """
        Register the signing account as a Symbiotic operator
        """
        return self._send("registerOperator")

    def is_operator(self, operator_address: str) -> bool:
        return self._call("isEntity", validate_address(operator_address), cast=bool)

    def get_total_operators(self) -> int:
        return self._call("totalEntities", cast=int)

    def get_operator_at_index(self, index: int) -> str:
        """
        Address of the ``index`` th registered operator, in registration order
        """
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise InvalidOperatorIndexError(
                f"Operator index must be a non-negative integer, got {index!r}"
            )
        return self._call("entity", index, cast=Web3.to_checksum_address)


class _OptInService(RegistryClient):
    """
    Both opt-in services expose the same interface,
    differing only in what kind of entity ``where`` is.
    """

    target: str = "target"

    def opt_in(self, where: str) -> PendingTransaction:
        return self._send("optIn", validate_address(where, f"{self.target} address"))

    def opt_out(self, where: str) -> PendingTransaction:
        return self._send("optOut", validate_address(where, f"{self.target} address"))

    def is_opted_in(self, operator_address: str, where: str) -> bool:
        return self._call(
            "isOptedIn",
            validate_address(operator_address, "operator address"),
            validate_address(where, f"{self.target} address"),
            cast=bool,
        )


class OperatorNetworkOptInService(_OptInService):
    """
    Opt operators into networks they intend to validate for
    """

    address_field = "operator_network_opt_in_service"
    abi = NETWORK_OPT_IN_SERVICE_ABI
    label = "Symbiotic Network Opt-In Service"
    target = "network"


class OperatorVaultOptInService(_OptInService):
    """
    Opt operators into vaults they want to receive stake from
    """

    address_field = "operator_vault_opt_in_service"
    abi = VAULT_OPT_IN_SERVICE_ABI
    label = "Symbiotic Vault Opt-In Service"
    target = "vault"
