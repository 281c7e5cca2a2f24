# ruff: noqa I001 - import order meaningful to avoid cycles
from byzop.clients.base import RegistryClient

from byzop.clients.native import NativeOperatorRegistry
from byzop.clients.symbiotic import (
    OperatorNetworkOptInService,
    OperatorRegistry,
    OperatorVaultOptInService,
)

__all__ = [
    "NativeOperatorRegistry",
    "OperatorNetworkOptInService",
    "OperatorRegistry",
    "OperatorVaultOptInService",
    "RegistryClient",
]
