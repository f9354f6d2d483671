"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from inventrack.application.dto import CreateProductCommand, ProductDTO
from inventrack.domain.model.product import Product
from inventrack.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, command: CreateProductCommand) -> ProductDTO:
        """Add a new product with its opening stock.

        The opening stock is recorded as the product's initial stock; it is
        the starting point of ledger replay, not a ledger entry.
        """
        product = Product.create(
            name=command.name,
            sku=command.sku,
            description=command.description,
            current_stock=command.current_stock,
            reorder_level=command.reorder_level,
        )

        with self._uow_factory() as uow:
            uow.products.save(product)
            uow.commit()

        logger.info("Created product #%d '%s' with stock %d", product.id, product.name, product.current_stock)
        return ProductDTO.from_domain(product)
