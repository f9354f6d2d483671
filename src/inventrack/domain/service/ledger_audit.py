"""Domain service: Ledger replay.

Recomputes a product's stock from its creation value and its ledger
entries. A product is consistent when the replayed value equals its
cached ``current_stock``.
"""

from __future__ import annotations

from collections.abc import Iterable

from inventrack.domain.model.transaction import TransactionEntry


def replay_stock(initial_stock: int, entries: Iterable[TransactionEntry]) -> int:
    """Sum signed quantities onto *initial_stock* in commit order."""
    stock = initial_stock
    for entry in sorted(entries, key=lambda e: e.id or 0):
        stock += entry.delta
    return stock
