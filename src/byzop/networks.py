"""
Contract addresses for each supported chain.
"""

from pydantic import BaseModel, ConfigDict

from byzop.exceptions import UnsupportedChainError
from byzop.types import ChecksumAddress

ETH_TOKEN_ADDRESS = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"
"""Placeholder address conventionally used for native ETH in token-address slots"""


class NetworkConfig(BaseModel):
    """
    Deployment addresses of the Native and Symbiotic contracts on one chain.

    A zero address means the contract is not deployed on that chain.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    scan_link: str
    """Base URL of the block explorer"""
    st_eth_address: ChecksumAddress
    wst_eth_address: ChecksumAddress

    # Native
    byz_operator_registry: ChecksumAddress

    # Symbiotic
    vault_factory: ChecksumAddress
    delegator_factory: ChecksumAddress
    slasher_factory: ChecksumAddress
    network_registry: ChecksumAddress
    network_metadata_service: ChecksumAddress
    network_middleware_service: ChecksumAddress
    operator_registry: ChecksumAddress
    operator_metadata_service: ChecksumAddress
    operator_vault_opt_in_service: ChecksumAddress
    operator_network_opt_in_service: ChecksumAddress
    vault_configurator: ChecksumAddress

    def tx_url(self, tx_hash: str) -> str:
        """Block explorer link for a transaction"""
        return f"{self.scan_link.rstrip('/')}/tx/{tx_hash}"

    def address_url(self, address: str) -> str:
        """Block explorer link for an account or contract"""
        return f"{self.scan_link.rstrip('/')}/address/{address}"


# Holesky and Sepolia share the Symbiotic testnet deployment
_SYMBIOTIC_TESTNET = {
    "vault_factory": "0x407A039D94948484D356eFB765b3c74382A050B4",
    "delegator_factory": "0x890CA3f95E0f40a79885B7400926544B2214B03f",
    "slasher_factory": "0xbf34bf75bb779c383267736c53a4ae86ac7bB299",
    "network_registry": "0x7d03b7343BF8d5cEC7C0C27ecE084a20113D15C9",
    "network_metadata_service": "0x0F7E58Cc4eA615E8B8BEB080dF8B8FDB63C21496",
    "network_middleware_service": "0x62a1ddfD86b4c1636759d9286D3A0EC722D086e3",
    "operator_registry": "0x6F75a4ffF97326A00e52662d82EA4FdE86a2C548",
    "operator_metadata_service": "0x0999048aB8eeAfa053bF8581D4Aa451ab45755c9",
    "operator_vault_opt_in_service": "0x95CC0a052ae33941877c9619835A233D21D57351",
    "operator_network_opt_in_service": "0x58973d16FFA900D11fC22e5e2B6840d9f7e13401",
    "vault_configurator": "0xD2191FE92987171691d552C219b8caEf186eb9cA",
}

NETWORKS: dict[int, NetworkConfig] = {
    1: NetworkConfig(
        name="Ethereum",
        scan_link="https://etherscan.io",
        st_eth_address="0xae7ab96520de3a18e5e111b5eaab095312d7fe84",
        wst_eth_address="0x7f39c581f595b53c5cb19bd0b3f8da6c935e2ca0",
        byz_operator_registry="0xEf08Be0D16F92A6ee8244e125230f82AfE5D28D7",
        vault_factory="0xAEb6bdd95c502390db8f52c8909F703E9Af6a346",
        delegator_factory="0x985Ed57AF9D475f1d83c1c1c8826A0E5A34E8C7B",
        slasher_factory="0x685c2eD7D59814d2a597409058Ee7a92F21e48Fd",
        network_registry="0xC773b1011461e7314CF05f97d95aa8e92C1Fd8aA",
        network_metadata_service="0x0000000000000000000000000000000000000000",
        network_middleware_service="0xD7dC9B366c027743D90761F71858BCa83C6899Ad",
        operator_registry="0xAd817a6Bc954F678451A71363f04150FDD81Af9F",
        operator_metadata_service="0x0000000000000000000000000000000000000000",
        operator_vault_opt_in_service="0xb361894bC06cbBA7Ea8098BF0e32EB1906A5F891",
        operator_network_opt_in_service="0x7133415b33B438843D581013f98A08704316633c",
        vault_configurator="0x29300b1d3150B4E2b12fE80BE72f365E200441EC",
    ),
    17000: NetworkConfig(
        name="Holesky",
        scan_link="https://holesky.etherscan.io",
        st_eth_address="0x3F1c547b21f65e10480dE3ad8E19fAAC46C95034",
        wst_eth_address="0x8d09a4502Cc8Cf1547aD300E066060D043f6982D",
        byz_operator_registry="0x28aCBD4582383c4AB996ee6eBc2340F9b9C57659",
        **_SYMBIOTIC_TESTNET,
    ),
    11155111: NetworkConfig(
        name="Ethereum Sepolia",
        scan_link="https://sepolia.etherscan.io",
        st_eth_address="0x3e3FE7dBc6B4C189E7128855dD526361c49b40Af",
        wst_eth_address="0xB82381A3fBD3FaFA77B3a7bE693342618240067b",
        byz_operator_registry="0xD73b55dD8a5DF6f9a752f610b2279c82575D23ad",
        **_SYMBIOTIC_TESTNET,
    ),
}


def get_network_config(chain_id: int) -> NetworkConfig:
    """
    Get the network configuration for a chain

    Raises:
        :class:`.UnsupportedChainError` if the chain has no configuration
    """
    try:
        return NETWORKS[chain_id]
    except KeyError:
        raise UnsupportedChainError(
            f"Chain ID {chain_id} is not supported. "
            f"Supported chains: {get_supported_chain_ids()}"
        ) from None


def get_supported_chain_ids() -> list[int]:
    return list(NETWORKS.keys())


def is_chain_supported(chain_id: int) -> bool:
    return chain_id in NETWORKS
