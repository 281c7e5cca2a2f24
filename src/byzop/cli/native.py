import json

import click

from byzop.cli import common
from byzop.exceptions import SignerMissingError


@click.group("native")
def native() -> None:
    """
    Native operator registry
    """


@native.command("register")
@click.argument("name")
@click.option("--fee", "-f", type=click.INT, required=True, help="Fee in basis points (0-1000)")
@click.option("--admin", "-a", help="Admin address. Defaults to the configured account")
@click.option(
    "--manager",
    "-m",
    "managers",
    multiple=True,
    help="Manager address, may be given several times. Defaults to the admin",
)
@common.chain_id_option
@common.wait_option
@common.handle_errors
def register(
    name: str,
    fee: int,
    admin: str | None = None,
    managers: tuple[str, ...] = (),
    chain_id: int | None = None,
    wait: bool = False,
) -> None:
    """Register a Native operator called NAME"""
    client = common.make_client(chain_id)
    if client.address is None:
        raise SignerMissingError("A signer is required to register an operator")
    if admin is None:
        admin = client.address
    if not managers:
        managers = (admin,)
    tx = client.register_native_operator(name, admin, fee, list(managers))
    common.report_transaction(tx, wait)


@native.command("info")
@click.argument("name")
@common.chain_id_option
@common.handle_errors
def info(name: str, chain_id: int | None = None) -> None:
    """Print the index, admin and fee of the operator called NAME as json"""
    client = common.make_client(chain_id)
    result: dict = {"name": name, "registered": client.is_native_operator_registered(name)}
    if result["registered"]:
        operator_index = client.get_native_operator_id(name)
        result["operator_index"] = operator_index
        result["admin"] = client.get_native_operator_admin(operator_index)
        result["fee"] = client.get_native_operator_fee(operator_index)
    click.echo(json.dumps(result))


@native.command("update-fee")
@click.argument("operator_index")
@click.argument("fee", type=click.INT)
@common.chain_id_option
@common.wait_option
@common.handle_errors
def update_fee(
    operator_index: str, fee: int, chain_id: int | None = None, wait: bool = False
) -> None:
    """Set the fee of OPERATOR_INDEX to FEE basis points"""
    tx = common.make_client(chain_id).update_native_operator_fee(operator_index, fee)
    common.report_transaction(tx, wait)


@native.command("unregister")
@click.argument("operator_index")
@common.chain_id_option
@common.wait_option
@common.handle_errors
def unregister(operator_index: str, chain_id: int | None = None, wait: bool = False) -> None:
    tx = common.make_client(chain_id).unregister_native_operator(operator_index)
    common.report_transaction(tx, wait)
