"""Product aggregate.

Products live independently of the ledger. The cached ``current_stock``
is the one field that must stay consistent with ledger history, so it can
only change through ``apply_movement()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from inventrack.domain.exceptions import InsufficientStockError, ValidationError
from inventrack.domain.model.transaction import MovementType
from inventrack.domain.model.value_objects import Quantity, StockLevel


@dataclass
class Product:
    """A tracked inventory item.

    Use ``Product.create()`` for new products; ``__init__`` stays simple so
    repositories can reconstitute persisted records without re-validating.

    Invariants:
    - ``current_stock`` is never negative
    - ``current_stock == initial_stock + sum of ledger deltas``
    """

    id: int | None
    name: str
    sku: str | None = None
    description: str | None = None
    current_stock: int = 0
    reorder_level: int = 0
    initial_stock: int = 0

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str | None,
        sku: str | None = None,
        description: str | None = None,
        current_stock: object = 0,
        reorder_level: object = 0,
    ) -> Product:
        if not name or not str(name).strip():
            raise ValidationError("Name is required")

        stock = StockLevel.of(current_stock, "currentStock").value
        return Product(
            id=None,
            name=str(name).strip(),
            sku=sku or None,
            description=description or None,
            current_stock=stock,
            reorder_level=StockLevel.of(reorder_level, "reorderLevel").value,
            initial_stock=stock,
        )

    # --- Mutations ------------------------------------------------------------

    def apply_movement(self, movement_type: MovementType, quantity: Quantity) -> int:
        """Apply a stock movement and return the new stock level.

        Raises InsufficientStockError, leaving the product untouched, when
        an OUT movement exceeds the stock on hand.
        """
        new_stock = self.current_stock + movement_type.signed(quantity.value)
        if new_stock < 0:
            raise InsufficientStockError(
                product_id=self.id,
                available=self.current_stock,
                requested=quantity.value,
            )
        self.current_stock = new_stock
        return new_stock

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Name is required")
        self.name = name.strip()

    def change_reorder_level(self, level: object) -> None:
        self.reorder_level = StockLevel.of(level, "reorderLevel").value

    # --- Computed properties --------------------------------------------------

    @property
    def needs_reorder(self) -> bool:
        return self.reorder_level > 0 and self.current_stock <= self.reorder_level
