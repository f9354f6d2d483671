"""Application service: Delete Product use case.

A product with ledger history cannot be deleted: its entries would be
left pointing at nothing and could no longer be replayed.
"""

from __future__ import annotations

import logging

from inventrack.domain.exceptions import ProductNotFoundError, ValidationError
from inventrack.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int) -> None:
        with self._uow_factory() as uow:
            if uow.products.get_by_id(product_id) is None:
                raise ProductNotFoundError(product_id)
            if uow.transactions.list_for_product(product_id):
                raise ValidationError("Product has ledger entries and cannot be deleted")

            uow.products.delete(product_id)
            uow.commit()

        logger.info("Deleted product #%d", product_id)
