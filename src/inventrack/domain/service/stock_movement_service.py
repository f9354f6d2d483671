"""Domain service: Stock Movement.

The only code allowed to change a product's ``current_stock``. It runs
inside an open UnitOfWork and stages two writes, the product update and
the ledger append, which the caller then commits together.

The sequence is validate-then-mutate: the product is loaded and the
invariant checked before anything is saved, so a rejected movement
leaves the working copy exactly as it was.
"""

from __future__ import annotations

import logging

from inventrack.domain.exceptions import InsufficientStockError, ProductNotFoundError
from inventrack.domain.model.product import Product
from inventrack.domain.model.transaction import MovementType, TransactionEntry
from inventrack.domain.model.value_objects import Quantity
from inventrack.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class StockMovementService:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def apply_movement(
        self,
        product_id: int,
        movement_type: MovementType,
        quantity: Quantity,
        note: str | None = None,
    ) -> tuple[Product, TransactionEntry]:
        """Stage one movement against one product.

        Raises ProductNotFoundError or InsufficientStockError without
        staging anything.
        """
        product = self._uow.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        before = product.current_stock
        try:
            product.apply_movement(movement_type, quantity)
        except InsufficientStockError:
            logger.warning(
                "Rejected %s %d for product #%d: only %d in stock",
                movement_type.value, quantity.value, product_id, before,
            )
            raise

        self._uow.products.save(product)
        entry = self._uow.transactions.append(
            TransactionEntry.record(movement_type, product.id, quantity.value, note)
        )
        logger.debug(
            "Staged %s %d for product #%d: %d -> %d",
            movement_type.value, quantity.value, product_id, before, product.current_stock,
        )
        return product, entry
