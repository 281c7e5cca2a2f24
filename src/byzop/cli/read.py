import json

import click
from rich.console import Console
from rich.table import Table

from byzop.cli import common
from byzop.networks import NETWORKS


@click.command("networks")
@click.option("--json", "as_json", is_flag=True, help="Print the full network table as json")
def networks(as_json: bool = False) -> None:
    """List supported chains and their registry addresses"""
    if as_json:
        click.echo(
            json.dumps({chain_id: network.model_dump() for chain_id, network in NETWORKS.items()})
        )
        return

    table = Table(title="Supported networks")
    table.add_column("Chain ID", justify="right")
    table.add_column("Name")
    table.add_column("Native registry")
    table.add_column("Symbiotic registry")
    table.add_column("Explorer")
    for chain_id, network in NETWORKS.items():
        table.add_row(
            str(chain_id),
            network.name,
            network.byz_operator_registry,
            network.operator_registry,
            network.scan_link,
        )
    Console().print(table)


@click.command("status")
@click.argument("address", required=False)
@click.option(
    "--network", "-n", "network_addresses", multiple=True, help="Network to check opt-in for"
)
@click.option("--vault", "-v", "vault_addresses", multiple=True, help="Vault to check opt-in for")
@click.option("--json", "as_json", is_flag=True, help="Print status as json")
@common.chain_id_option
@common.handle_errors
def status(
    address: str | None,
    network_addresses: tuple[str, ...],
    vault_addresses: tuple[str, ...],
    as_json: bool = False,
    chain_id: int | None = None,
) -> None:
    """
    Show the Symbiotic registration and opt-ins of ADDRESS.

    ADDRESS defaults to the configured account.
    """
    client = common.make_client(chain_id)
    result = client.get_operator_status(
        address, networks=network_addresses, vaults=vault_addresses
    )
    if as_json:
        click.echo(json.dumps(result.model_dump()))
        return

    table = Table(title=f"{result.address} on {client.network.name}", show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Symbiotic operator", _yes_no(result.is_symbiotic_operator))
    table.add_row("Total Symbiotic operators", str(result.total_symbiotic_operators))
    for network, opted_in in result.networks.items():
        table.add_row(f"Network {network}", _yes_no(opted_in))
    for vault, opted_in in result.vaults.items():
        table.add_row(f"Vault {vault}", _yes_no(opted_in))
    Console().print(table)


def _yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"
