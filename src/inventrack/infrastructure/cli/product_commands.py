"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from inventrack.application.add_product import AddProductHandler
from inventrack.application.delete_product import DeleteProductHandler
from inventrack.application.dto import CreateProductCommand, UpdateProductCommand
from inventrack.application.list_products import ListProductsHandler
from inventrack.application.seed_catalog import SeedCatalogHandler
from inventrack.application.update_product import UpdateProductHandler
from inventrack.domain.exceptions import DomainException
from inventrack.infrastructure.bootstrap import unit_of_work_factory
from inventrack.infrastructure.cli.errors import storage_errors


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--sku", default=None, help="Stock keeping unit code.")
@click.option("--description", default=None, help="Free-text description.")
@click.option("--stock", "current_stock", default=0, type=int, show_default=True, help="Opening stock.")
@click.option("--reorder-level", default=0, type=int, show_default=True, help="Reorder threshold.")
def product_add(
    name: str,
    sku: str | None,
    description: str | None,
    current_stock: int,
    reorder_level: int,
) -> None:
    """Add a new product."""
    command = CreateProductCommand(
        name=name,
        sku=sku,
        description=description,
        current_stock=current_stock,
        reorder_level=reorder_level,
    )

    try:
        with storage_errors():
            handler = AddProductHandler(uow_factory=unit_of_work_factory())
            dto = handler.handle(command)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added with stock {dto.current_stock}")


@click.command("list")
def product_list() -> None:
    """List all products (* marks products at or below their reorder level)."""
    with storage_errors():
        handler = ListProductsHandler(uow_factory=unit_of_work_factory())
        products = handler.handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'SKU':<12} {'Stock':>8} {'Reorder':>8}")
    click.echo("-" * 58)
    for p in products:
        flag = "  *" if p.needs_reorder else ""
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.sku or '-':<12} {p.current_stock:>8} {p.reorder_level:>8}{flag}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--sku", default=None, help="New SKU (empty string clears it).")
@click.option("--description", default=None, help="New description (empty string clears it).")
@click.option("--reorder-level", default=None, type=int, help="New reorder threshold.")
def product_update(
    product_id: int,
    name: str | None,
    sku: str | None,
    description: str | None,
    reorder_level: int | None,
) -> None:
    """Update a product's details. Stock changes go through 'stock in/out'."""
    command = UpdateProductCommand(
        product_id=product_id,
        name=name,
        sku=sku,
        description=description,
        reorder_level=reorder_level,
    )

    try:
        with storage_errors():
            handler = UpdateProductHandler(uow_factory=unit_of_work_factory())
            dto = handler.handle(command)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Delete a product that has no ledger history."""
    try:
        with storage_errors():
            handler = DeleteProductHandler(uow_factory=unit_of_work_factory())
            handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")


@click.command("seed")
@click.confirmation_option(prompt="This erases all products and the whole ledger. Continue?")
def seed() -> None:
    """Reset the store to the demo catalog."""
    with storage_errors():
        handler = SeedCatalogHandler(uow_factory=unit_of_work_factory())
        products = handler.handle()

    click.echo(f"Seed finished: {len(products)} products.")
