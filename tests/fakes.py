"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in dicts. No file I/O, no side effects.
FakeUnitOfWork copies the committed state on entry, so uncommitted
changes vanish exactly as they do with the real store.
"""

from __future__ import annotations

import copy
import threading
from dataclasses import replace

from inventrack.domain.model.product import Product
from inventrack.domain.model.transaction import TransactionEntry
from inventrack.domain.repository.product_repository import ProductRepository
from inventrack.domain.repository.transaction_repository import TransactionRepository
from inventrack.domain.repository.unit_of_work import UnitOfWork


class FakeState:
    """Committed state shared by every FakeUnitOfWork built from it."""

    def __init__(self, products: list[Product] | None = None) -> None:
        self.products: dict[int, Product] = {}
        self.transactions: list[TransactionEntry] = []
        self.sequences = {"product": 0, "transaction": 0}
        self.lock = threading.RLock()
        self.commits = 0
        for p in products or []:
            self.products[p.id] = p
            self.sequences["product"] = max(self.sequences["product"], p.id)


class FakeProductRepository(ProductRepository):

    def __init__(self, store: dict[int, Product], sequences: dict[str, int]) -> None:
        self._store = store
        self._sequences = sequences

    def next_id(self) -> int:
        self._sequences["product"] += 1
        return self._sequences["product"]

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return sorted(self._store.values(), key=lambda p: p.id)

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self.next_id()
        self._store[product.id] = product

    def delete(self, product_id: int) -> None:
        del self._store[product_id]

    def purge(self) -> None:
        self._store.clear()


class FakeTransactionRepository(TransactionRepository):

    def __init__(self, entries: list[TransactionEntry], sequences: dict[str, int]) -> None:
        self._entries = entries
        self._sequences = sequences

    def append(self, entry: TransactionEntry) -> TransactionEntry:
        self._sequences["transaction"] += 1
        stored = replace(entry, id=self._sequences["transaction"])
        self._entries.append(stored)
        return stored

    def list_all(self) -> list[TransactionEntry]:
        return list(self._entries)

    def list_for_product(self, product_id: int) -> list[TransactionEntry]:
        return [e for e in self._entries if e.product_id == product_id]

    def purge(self) -> None:
        self._entries.clear()


class FakeUnitOfWork(UnitOfWork):

    def __init__(self, state: FakeState) -> None:
        self._state = state

    def _begin(self) -> None:
        self._state.lock.acquire()
        self.rollback()

    def _end(self) -> None:
        self._state.lock.release()

    def commit(self) -> None:
        self._state.products = self._products
        self._state.transactions = self._entries
        self._state.sequences = self._sequences
        self._state.commits += 1
        self.rollback()

    def rollback(self) -> None:
        self._products = copy.deepcopy(self._state.products)
        self._entries = list(self._state.transactions)
        self._sequences = dict(self._state.sequences)
        self.products = FakeProductRepository(self._products, self._sequences)
        self.transactions = FakeTransactionRepository(self._entries, self._sequences)


def uow_factory(state: FakeState):
    return lambda: FakeUnitOfWork(state)
