import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click
from rich.console import Console

from byzop.client import ByzOperatorClient
from byzop.config import Config
from byzop.contract import PendingTransaction
from byzop.exceptions import ByzopError

F = TypeVar("F", bound=Callable[..., Any])

console = Console(stderr=True)

chain_id_option = click.option(
    "--chain-id",
    "-c",
    type=click.INT,
    default=None,
    help="Chain to use. Defaults to the configured chain_id (BYZOP_CHAIN_ID)",
)
wait_option = click.option(
    "--wait/--no-wait",
    default=False,
    help="Block until the transaction is mined",
)


def make_client(chain_id: int | None = None) -> ByzOperatorClient:
    config = Config() if chain_id is None else Config(chain_id=chain_id)
    return ByzOperatorClient.from_config(config)


def handle_errors(fn: F) -> F:
    """Report SDK errors as click usage errors rather than tracebacks"""

    @functools.wraps(fn)
    def _wrapped(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except ByzopError as e:
            raise click.ClickException(str(e)) from e

    return _wrapped  # type: ignore[return-value]


def report_transaction(tx: PendingTransaction, wait: bool) -> None:
    click.echo(tx.hash)
    if tx.explorer_url:
        console.print(f"[dim]{tx.explorer_url}[/dim]")
    if wait:
        with console.status(f"Waiting for {tx.method}"):
            receipt = tx.wait(timeout=Config().tx_timeout)
        console.print(f"[bold green]Mined[/bold green] in block {receipt['blockNumber']}")
