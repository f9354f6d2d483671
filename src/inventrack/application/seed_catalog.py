"""Application service: Seed Catalog use case.

Administrative reset for demos and local development: wipes the ledger
and the products, then loads a small starter catalog, all in one unit of
work.
"""

from __future__ import annotations

import logging

from inventrack.application.dto import CreateProductCommand, ProductDTO
from inventrack.domain.model.product import Product
from inventrack.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)

DEMO_CATALOG = (
    CreateProductCommand(name="Pens", sku="PEN-001", current_stock=100, reorder_level=10),
    CreateProductCommand(name="Notebooks", sku="NB-003", current_stock=50, reorder_level=5),
    CreateProductCommand(name="Staplers", sku="STP-01", current_stock=20, reorder_level=2),
)


class SeedCatalogHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, catalog: tuple[CreateProductCommand, ...] = DEMO_CATALOG) -> list[ProductDTO]:
        products = [
            Product.create(
                name=item.name,
                sku=item.sku,
                description=item.description,
                current_stock=item.current_stock,
                reorder_level=item.reorder_level,
            )
            for item in catalog
        ]

        with self._uow_factory() as uow:
            uow.transactions.purge()
            uow.products.purge()
            for product in products:
                uow.products.save(product)
            uow.commit()

        logger.info("Seeded catalog with %d products", len(products))
        return [ProductDTO.from_domain(p) for p in products]
