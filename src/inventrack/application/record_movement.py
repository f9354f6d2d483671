"""Application service: Record Movement use case.

The stock-mutation protocol. One unit of work covers the whole
read-compute-write-append sequence, so:

- the product is read at its latest committed value (no other unit can
  commit in between, the unit of work serializes them);
- the product update and the ledger entry are committed together;
- any error, including a rejected movement, leaves storage untouched.

Input is validated by ``MovementCommand.parse`` before this handler
runs, so malformed requests never open a unit of work.
"""

from __future__ import annotations

import logging

from inventrack.application.dto import MovementCommand, MovementResultDTO, ProductDTO, TransactionDTO
from inventrack.domain.repository.unit_of_work import UnitOfWorkFactory
from inventrack.domain.service.stock_movement_service import StockMovementService

logger = logging.getLogger(__name__)


class RecordMovementHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, command: MovementCommand) -> MovementResultDTO:
        with self._uow_factory() as uow:
            svc = StockMovementService(uow)
            product, entry = svc.apply_movement(
                product_id=command.product_id,
                movement_type=command.movement_type,
                quantity=command.quantity,
                note=command.note,
            )
            uow.commit()

        logger.info(
            "Recorded transaction #%d: %s %d for product #%d, stock now %d",
            entry.id, entry.type.value, entry.quantity, product.id, product.current_stock,
        )
        return MovementResultDTO(
            product=ProductDTO.from_domain(product),
            transaction=TransactionDTO.from_domain(entry),
        )
