"""Ledger entries.

A TransactionEntry records one stock movement. Entries are immutable once
appended; the ledger only ever grows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class MovementType(Enum):
    IN = "IN"
    OUT = "OUT"

    def signed(self, quantity: int) -> int:
        """Return the stock delta for *quantity* units moving this way."""
        return quantity if self is MovementType.IN else -quantity


@dataclass(frozen=True)
class TransactionEntry:
    """A single immutable ledger record.

    ``id`` is None until the ledger assigns one on append.
    """

    id: int | None
    type: MovementType
    product_id: int
    quantity: int
    note: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def delta(self) -> int:
        return self.type.signed(self.quantity)

    @staticmethod
    def record(
        movement_type: MovementType,
        product_id: int,
        quantity: int,
        note: str | None = None,
    ) -> TransactionEntry:
        """Create a new, not yet appended, ledger entry stamped with now."""
        return TransactionEntry(
            id=None,
            type=movement_type,
            product_id=product_id,
            quantity=quantity,
            note=note,
        )
