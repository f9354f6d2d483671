"""Abstract unit of work spanning the product and ledger stores.

A unit of work is the transactional boundary for the stock-mutation
protocol: everything saved through ``products`` and ``transactions``
becomes visible together on ``commit()``, or not at all.

Usage::

    with uow_factory() as uow:
        product = uow.products.get_by_id(1)
        ...
        uow.commit()

Leaving the ``with`` block without committing discards the changes.
Implementations must also serialize units against each other for as long
as they are open.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from inventrack.domain.repository.product_repository import ProductRepository
from inventrack.domain.repository.transaction_repository import TransactionRepository


class UnitOfWork(ABC):

    products: ProductRepository
    transactions: TransactionRepository

    def __enter__(self) -> UnitOfWork:
        self._begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        finally:
            self._end()

    @abstractmethod
    def _begin(self) -> None:
        """Acquire isolation and load a working copy of the stores."""

    def _end(self) -> None:
        """Release whatever ``_begin`` acquired."""

    @abstractmethod
    def commit(self) -> None:
        """Make every change in the working copy durable at once."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard uncommitted changes. A no-op right after ``commit()``."""


UnitOfWorkFactory = Callable[[], UnitOfWork]
