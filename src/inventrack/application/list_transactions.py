"""Application service: List Transactions use case (query).

Newest entries first. Each row carries the referenced product as it is
now, not as it was when the entry was recorded.
"""

from __future__ import annotations

from inventrack.application.dto import TransactionDTO
from inventrack.domain.repository.unit_of_work import UnitOfWorkFactory


class ListTransactionsHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int | None = None) -> list[TransactionDTO]:
        with self._uow_factory() as uow:
            if product_id is None:
                entries = uow.transactions.list_all()
            else:
                entries = uow.transactions.list_for_product(product_id)
            products = {p.id: p for p in uow.products.list_all()}

        entries.sort(key=lambda e: (e.created_at, e.id), reverse=True)
        return [TransactionDTO.from_domain(e, products.get(e.product_id)) for e in entries]
