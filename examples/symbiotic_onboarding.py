"""
Symbiotic operator onboarding

Registers the configured account as a Symbiotic operator, then opts into
a network and a vault, waiting for each transaction to be mined.

Steps that are already done are skipped, so the script can be re-run
after a failure.

Usage::

    export BYZOP_RPC_URL=https://ethereum-holesky-rpc.publicnode.com
    export BYZOP_PRIVATE_KEY=0x...
    python examples/symbiotic_onboarding.py <network address> <vault address>
"""

import sys

from byzop import ByzOperatorClient, init_logger

logger = init_logger("examples.onboarding")


def main(network: str, vault: str) -> None:
    client = ByzOperatorClient.from_config()
    logger.info("Onboarding %s on %s", client.address, client.network.name)

    if client.is_operator(client.address):
        logger.info("Already registered")
    else:
        client.register_operator().wait()

    if client.is_opted_in_network(client.address, network):
        logger.info("Already opted into network %s", network)
    else:
        client.opt_in_network(network).wait()

    if client.is_opted_in_vault(client.address, vault):
        logger.info("Already opted into vault %s", vault)
    else:
        client.opt_in_vault(vault).wait()

    status = client.get_operator_status(networks=[network], vaults=[vault])
    logger.info("Done: %s", status)


if __name__ == "__main__":
    if len(sys.argv) != 3:
        sys.exit(__doc__)
    main(sys.argv[1], sys.argv[2])
