"""Application service: Update Product use case."""

from __future__ import annotations

from inventrack.application.dto import ProductDTO, UpdateProductCommand
from inventrack.domain.exceptions import ProductNotFoundError, ValidationError
from inventrack.domain.repository.unit_of_work import UnitOfWorkFactory


class UpdateProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, command: UpdateProductCommand) -> ProductDTO:
        """Apply a partial update to a product's descriptive fields.

        Stock is not among them: ``UpdateProductCommand`` has no stock
        field, so this path can never bypass the ledger.
        """
        if command.is_empty:
            raise ValidationError("Nothing to update")

        with self._uow_factory() as uow:
            product = uow.products.get_by_id(command.product_id)
            if product is None:
                raise ProductNotFoundError(command.product_id)

            if command.name is not None:
                product.rename(command.name)
            if command.sku is not None:
                product.sku = command.sku or None
            if command.description is not None:
                product.description = command.description or None
            if command.reorder_level is not None:
                product.change_reorder_level(command.reorder_level)

            uow.products.save(product)
            uow.commit()

        return ProductDTO.from_domain(product)
