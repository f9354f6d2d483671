"""Application service: Verify Ledger use case (query)."""

from __future__ import annotations

import logging
from collections import defaultdict

from inventrack.application.dto import LedgerCheckDTO
from inventrack.domain.model.transaction import TransactionEntry
from inventrack.domain.repository.unit_of_work import UnitOfWorkFactory
from inventrack.domain.service.ledger_audit import replay_stock

logger = logging.getLogger(__name__)


class VerifyLedgerHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self) -> list[LedgerCheckDTO]:
        """Replay the ledger for every product and compare with its stock."""
        with self._uow_factory() as uow:
            products = uow.products.list_all()
            by_product: dict[int, list[TransactionEntry]] = defaultdict(list)
            for entry in uow.transactions.list_all():
                by_product[entry.product_id].append(entry)

        checks = [
            LedgerCheckDTO(
                product_id=p.id,  # type: ignore[arg-type]
                product_name=p.name,
                recorded_stock=p.current_stock,
                replayed_stock=replay_stock(p.initial_stock, by_product[p.id]),
                entries=len(by_product[p.id]),
            )
            for p in products
        ]
        for check in checks:
            if not check.consistent:
                logger.error(
                    "Ledger mismatch for product #%d: recorded %d, replayed %d",
                    check.product_id, check.recorded_stock, check.replayed_stock,
                )
        return checks
