import click

from inventrack.infrastructure.bootstrap import unit_of_work_factory
from inventrack.infrastructure.cli.errors import storage_errors
from inventrack.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
    seed,
)
from inventrack.infrastructure.cli.transaction_commands import (
    ledger_verify,
    stock_in,
    stock_out,
    transaction_list,
)
from inventrack.infrastructure.config import settings
from inventrack.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, ...).")
def cli(log_level: str | None) -> None:
    """InvenTrack: stock levels with an append-only ledger"""
    setup_logging(log_level)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Record stock movements."""


@cli.group()
def transaction() -> None:
    """Inspect the transaction ledger."""


@cli.group()
def ledger() -> None:
    """Audit the ledger."""


@cli.command("status")
def status() -> None:
    """Check that the store is reachable."""
    with storage_errors():
        uow_factory = unit_of_work_factory()
        with uow_factory():
            pass
    click.echo("status: ok")
    click.echo(f"store:  {settings.store_path}")


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
stock.add_command(stock_in)
stock.add_command(stock_out)
transaction.add_command(transaction_list)
ledger.add_command(ledger_verify)
cli.add_command(seed)
