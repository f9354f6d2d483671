"""Abstract repository for the append-only transaction ledger."""

from __future__ import annotations

from abc import ABC, abstractmethod

from inventrack.domain.model.transaction import TransactionEntry


class TransactionRepository(ABC):

    @abstractmethod
    def append(self, entry: TransactionEntry) -> TransactionEntry:
        """Append an entry and return it with its assigned ID."""

    @abstractmethod
    def list_all(self) -> list[TransactionEntry]:
        """Return every entry in commit (ID) order."""

    @abstractmethod
    def list_for_product(self, product_id: int) -> list[TransactionEntry]:
        """Return one product's entries in commit order."""

    @abstractmethod
    def purge(self) -> None:
        """Drop the whole ledger.

        Administrative bulk operation; breaks the replay history of every
        product, so it must be paired with removing the products too.
        """
