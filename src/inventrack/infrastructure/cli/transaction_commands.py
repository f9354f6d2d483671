"""CLI commands for stock movements and the transaction ledger."""

from __future__ import annotations

import click

from inventrack.application.dto import MovementCommand
from inventrack.application.list_transactions import ListTransactionsHandler
from inventrack.application.record_movement import RecordMovementHandler
from inventrack.application.verify_ledger import VerifyLedgerHandler
from inventrack.domain.exceptions import DomainException
from inventrack.infrastructure.bootstrap import unit_of_work_factory
from inventrack.infrastructure.cli.errors import storage_errors


def _record(movement_type: str, product_id: int, quantity: int, note: str | None) -> None:
    """Shared body of 'stock in' and 'stock out'."""
    try:
        command = MovementCommand.parse(movement_type, product_id, quantity, note)
        with storage_errors():
            handler = RecordMovementHandler(uow_factory=unit_of_work_factory())
            result = handler.handle(command)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    tr = result.transaction
    click.echo(
        f"Transaction #{tr.id}: {tr.type} {tr.quantity} of '{result.product.name}' "
        f"(stock now {result.product.current_stock})"
    )


@click.command("in")
@click.option("--product-id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units received.")
@click.option("--note", default=None, help="Optional note for the ledger.")
def stock_in(product_id: int, quantity: int, note: str | None) -> None:
    """Receive stock into a product."""
    _record("IN", product_id, quantity, note)


@click.command("out")
@click.option("--product-id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units issued.")
@click.option("--note", default=None, help="Optional note for the ledger.")
def stock_out(product_id: int, quantity: int, note: str | None) -> None:
    """Issue stock from a product. Rejected if stock would go negative."""
    _record("OUT", product_id, quantity, note)


@click.command("list")
@click.option("--product-id", default=None, type=int, help="Only this product's entries.")
def transaction_list(product_id: int | None) -> None:
    """List ledger entries, newest first."""
    with storage_errors():
        handler = ListTransactionsHandler(uow_factory=unit_of_work_factory())
        rows = handler.handle(product_id=product_id)

    if not rows:
        click.echo("No transactions found.")
        return

    click.echo(f"{'ID':<6} {'When (UTC)':<20} {'Type':<5} {'Qty':>6} {'Product':<20} Note")
    click.echo("-" * 72)
    for row in rows:
        when = row.created_at[:19].replace("T", " ")
        product = row.product.name if row.product else f"#{row.product_id} (deleted)"
        click.echo(
            f"{row.id:<6} {when:<20} {row.type:<5} {row.quantity:>6} {product:<20} {row.note or ''}"
        )


@click.command("verify")
def ledger_verify() -> None:
    """Replay the ledger and check every product's stock against it."""
    with storage_errors():
        handler = VerifyLedgerHandler(uow_factory=unit_of_work_factory())
        checks = handler.handle()

    mismatches = [c for c in checks if not c.consistent]
    for c in mismatches:
        click.echo(
            f"MISMATCH product #{c.product_id} '{c.product_name}': "
            f"recorded {c.recorded_stock}, replayed {c.replayed_stock}"
        )
    if mismatches:
        raise click.ClickException(f"{len(mismatches)} product(s) out of sync with the ledger")

    click.echo(f"Ledger consistent for {len(checks)} product(s).")
