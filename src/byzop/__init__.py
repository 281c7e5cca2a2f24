from byzop.config import config as cfg
from byzop.logging import init_logger
from byzop.client import ByzOperatorClient, OperatorStatus
from byzop.contract import PendingTransaction
from byzop.networks import (
    ETH_TOKEN_ADDRESS,
    NETWORKS,
    NetworkConfig,
    get_network_config,
    get_supported_chain_ids,
    is_chain_supported,
)

__all__ = [
    "ETH_TOKEN_ADDRESS",
    "NETWORKS",
    "ByzOperatorClient",
    "NetworkConfig",
    "OperatorStatus",
    "PendingTransaction",
    "cfg",
    "get_network_config",
    "get_supported_chain_ids",
    "init_logger",
    "is_chain_supported",
]
