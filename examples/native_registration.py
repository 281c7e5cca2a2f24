"""
Native operator registration

Registers an operator in the Byzantine native registry with the configured
account as admin and sole manager, then reads back its index and fee.
"""

import sys

from byzop import ByzOperatorClient, init_logger

logger = init_logger("examples.native")


def main(name: str, fee: int) -> None:
    client = ByzOperatorClient.from_config()

    if client.is_native_operator_registered(name):
        logger.info("%s is already registered", name)
    else:
        tx = client.register_native_operator(name, client.address, fee, [client.address])
        logger.info("Registering %s: %s", name, tx.explorer_url)
        tx.wait()

    operator_index = client.get_native_operator_id(name)
    logger.info(
        "%s: index %s, admin %s, fee %s bps",
        name,
        operator_index,
        client.get_native_operator_admin(operator_index),
        client.get_native_operator_fee(operator_index),
    )


if __name__ == "__main__":
    if len(sys.argv) != 3:
        sys.exit("usage: native_registration.py <name> <fee in basis points>")
    main(sys.argv[1], int(sys.argv[2]))
