"""JSON-document-backed implementation of TransactionRepository."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from inventrack.domain.model.transaction import MovementType, TransactionEntry
from inventrack.domain.repository.transaction_repository import TransactionRepository


class JsonTransactionRepository(TransactionRepository):

    def __init__(self, document: dict) -> None:
        self._document = document

    # --- TransactionRepository interface --------------------------------------

    def append(self, entry: TransactionEntry) -> TransactionEntry:
        sequences = self._document["sequences"]
        sequences["transaction"] += 1
        stored = replace(entry, id=sequences["transaction"])
        self._document["transactions"].append(self._to_raw(stored))
        return stored

    def list_all(self) -> list[TransactionEntry]:
        entries = [self._to_domain(raw) for raw in self._document["transactions"]]
        return sorted(entries, key=lambda e: e.id)

    def list_for_product(self, product_id: int) -> list[TransactionEntry]:
        return [e for e in self.list_all() if e.product_id == product_id]

    def purge(self) -> None:
        self._document["transactions"] = []

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(entry: TransactionEntry) -> dict:
        return {
            "id": entry.id,
            "type": entry.type.value,
            "product_id": entry.product_id,
            "quantity": entry.quantity,
            "note": entry.note,
            "created_at": entry.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> TransactionEntry:
        return TransactionEntry(
            id=raw["id"],
            type=MovementType(raw["type"]),
            product_id=raw["product_id"],
            quantity=raw["quantity"],
            note=raw.get("note"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
