import click

from byzop.cli import common


@click.group("symbiotic")
def symbiotic() -> None:
    """
    Symbiotic operator registration and opt-ins
    """


@symbiotic.command("register")
@common.chain_id_option
@common.wait_option
@common.handle_errors
def register(chain_id: int | None = None, wait: bool = False) -> None:
    """Register the configured account as a Symbiotic operator"""
    tx = common.make_client(chain_id).register_operator()
    common.report_transaction(tx, wait)


@symbiotic.command("opt-in-network")
@click.argument("network")
@common.chain_id_option
@common.wait_option
@common.handle_errors
def opt_in_network(network: str, chain_id: int | None = None, wait: bool = False) -> None:
    """Opt into validating for NETWORK"""
    tx = common.make_client(chain_id).opt_in_network(network)
    common.report_transaction(tx, wait)


@symbiotic.command("opt-out-network")
@click.argument("network")
@common.chain_id_option
@common.wait_option
@common.handle_errors
def opt_out_network(network: str, chain_id: int | None = None, wait: bool = False) -> None:
    tx = common.make_client(chain_id).opt_out_network(network)
    common.report_transaction(tx, wait)


@symbiotic.command("opt-in-vault")
@click.argument("vault")
@common.chain_id_option
@common.wait_option
@common.handle_errors
def opt_in_vault(vault: str, chain_id: int | None = None, wait: bool = False) -> None:
    """Opt into receiving stake from VAULT"""
    tx = common.make_client(chain_id).opt_in_vault(vault)
    common.report_transaction(tx, wait)


@symbiotic.command("opt-out-vault")
@click.argument("vault")
@common.chain_id_option
@common.wait_option
@common.handle_errors
def opt_out_vault(vault: str, chain_id: int | None = None, wait: bool = False) -> None:
    tx = common.make_client(chain_id).opt_out_vault(vault)
    common.report_transaction(tx, wait)
