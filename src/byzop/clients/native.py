"""
Client for the Byzantine Native operator registry.

Native operators are identified by a unique name, and by the ``bytes32``
operator index the registry derives from it (see :meth:`.NativeOperatorRegistry.get_operator_id`).
Each operator has a single admin, a set of managers and a fee in basis points.
"""

from collections.abc import Sequence

from web3 import Web3

from byzop.abi import NATIVE_OPERATOR_REGISTRY_ABI
from byzop.clients.base import RegistryClient
from byzop.contract import (
    PendingTransaction,
    validate_address,
    validate_addresses,
    validate_operator_fee,
    validate_operator_index,
    validate_operator_name,
)
from byzop.types import OperatorIndex


class NativeOperatorRegistry(RegistryClient):
    address_field = "byz_operator_registry"
    abi = NATIVE_OPERATOR_REGISTRY_ABI
    label = "Native Operator Registry"

    def register_operator(
        self, name: str, admin: str, operator_fee: int, managers: Sequence[str]
    ) -> PendingTransaction:
        """
        Register as an operator in the Native ecosystem

        Args:
            name: Unique name for the operator
            admin: Address that will administer the operator
            operator_fee: Fee in basis points, between 0 and 1000
            managers: Addresses allowed to manage the operator

        Returns:
            The pending ``registerOperator`` transaction.
            Use :meth:`.get_operator_id` to get the index of the new operator.
        """
        name = validate_operator_name(name)
        operator_fee = validate_operator_fee(operator_fee)
        admin = validate_address(admin, "admin address")
        managers = validate_addresses(managers, "manager address")
        return self._send("registerOperator", name, admin, operator_fee, managers)

    def unregister_operator(self, operator_index: OperatorIndex) -> PendingTransaction:
        return self._send("unregisterOperator", validate_operator_index(operator_index))

    def is_operator_registered(self, name: str) -> bool:
        """Whether an operator name is already taken"""
        return self._call("isOperatorRegistered", validate_operator_name(name), cast=bool)

    def get_operator_id(self, name: str) -> str:
        """
        The ``bytes32`` operator index for a name, as a ``0x`` hex string.

        Computed from the name alone, so returns an id whether or not the name is registered.
        """
        return self._call("getOperatorId", validate_operator_name(name), cast=Web3.to_hex)

    def get_operator_admin(self, operator_index: OperatorIndex) -> str:
        return self._call(
            "getOperatorAdmin",
            validate_operator_index(operator_index),
            cast=Web3.to_checksum_address,
        )

    def get_operator_fee(self, operator_index: OperatorIndex) -> int:
        """Fee in basis points"""
        return self._call("getOperatorFee", validate_operator_index(operator_index), cast=int)

    def is_manager_of_operator(self, operator_index: OperatorIndex, address: str) -> bool:
        return self._call(
            "isManagerOfOperator",
            validate_operator_index(operator_index),
            validate_address(address),
            cast=bool,
        )

    def set_operator_manager(
        self, operator_index: OperatorIndex, managers: Sequence[str], is_manager: bool
    ) -> PendingTransaction:
        """
        Grant (``is_manager=True``) or revoke manager rights for a set of addresses
        """
        return self._send(
            "setOperatorManager",
            validate_operator_index(operator_index),
            validate_addresses(managers, "manager address"),
            bool(is_manager),
        )

    def transfer_admin_role(
        self, operator_index: OperatorIndex, new_admin: str
    ) -> PendingTransaction:
        return self._send(
            "transferAdminRole",
            validate_operator_index(operator_index),
            validate_address(new_admin, "new admin address"),
        )

    def update_operator_fee(
        self, operator_index: OperatorIndex, operator_fee: int
    ) -> PendingTransaction:
        return self._send(
            "updateOperatorFee",
            validate_operator_index(operator_index),
            validate_operator_fee(operator_fee),
        )
