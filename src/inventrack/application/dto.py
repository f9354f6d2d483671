"""Data Transfer Objects: plain containers that cross layer boundaries.

Commands carry caller input into the application layer and validate it
before any repository is touched. Output DTOs carry results back out
without exposing the mutable domain objects. ``from_payload`` and
``to_payload`` speak the camelCase shape used by external callers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from inventrack.domain.exceptions import ValidationError
from inventrack.domain.model.product import Product
from inventrack.domain.model.transaction import MovementType, TransactionEntry
from inventrack.domain.model.value_objects import Quantity, coerce_int

MOVEMENT_INPUT_ERROR = "Valid productId and positive quantity required"


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CreateProductCommand:
    """Input: a new product. Stock fields are coerced by the aggregate."""

    name: str | None
    sku: str | None = None
    description: str | None = None
    current_stock: object = 0
    reorder_level: object = 0

    @staticmethod
    def from_payload(payload: Mapping[str, object]) -> CreateProductCommand:
        return CreateProductCommand(
            name=_optional_str(payload.get("name")),
            sku=_optional_str(payload.get("sku")),
            description=_optional_str(payload.get("description")),
            current_stock=payload.get("currentStock", 0),
            reorder_level=payload.get("reorderLevel", 0),
        )


_UPDATABLE_FIELDS = {
    "name": "name",
    "sku": "sku",
    "description": "description",
    "reorderLevel": "reorder_level",
}
_STOCK_FIELDS = ("currentStock", "current_stock", "initialStock", "initial_stock")


@dataclass(frozen=True)
class UpdateProductCommand:
    """Input: a partial product update. None means "leave unchanged".

    An empty string clears ``sku`` or ``description``. Stock cannot be
    set here; it only moves through recorded movements.
    """

    product_id: int
    name: str | None = None
    sku: str | None = None
    description: str | None = None
    reorder_level: object = None

    @property
    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.name, self.sku, self.description, self.reorder_level)
        )

    @staticmethod
    def from_payload(product_id: object, payload: Mapping[str, object]) -> UpdateProductCommand:
        pid = coerce_int(product_id)
        if pid is None:
            raise ValidationError(f"Invalid product id: {product_id!r}")

        if any(key in payload for key in _STOCK_FIELDS):
            raise ValidationError("currentStock can only be changed through stock movements")

        fields: dict[str, object] = {}
        unknown: list[str] = []
        for key, value in payload.items():
            if key == "id":
                if coerce_int(value) != pid:
                    raise ValidationError("Product id cannot be changed")
                continue
            if key not in _UPDATABLE_FIELDS:
                unknown.append(key)
                continue
            fields[_UPDATABLE_FIELDS[key]] = value
        if unknown:
            raise ValidationError(f"Unknown product field(s): {', '.join(sorted(unknown))}")

        return UpdateProductCommand(
            product_id=pid,
            name=_optional_str(fields.get("name")),
            sku=_clearable_str(fields, "sku"),
            description=_clearable_str(fields, "description"),
            reorder_level=fields.get("reorder_level"),
        )


@dataclass(frozen=True)
class MovementCommand:
    """Input: one validated stock movement."""

    product_id: int
    movement_type: MovementType
    quantity: Quantity
    note: str | None = None

    @staticmethod
    def parse(
        movement_type: object,
        product_id: object,
        quantity: object,
        note: object = None,
    ) -> MovementCommand:
        """Validate raw movement input.

        The type is checked first, then product id and quantity together,
        so callers always get the same message for the same mistake.
        """
        try:
            kind = MovementType(movement_type)
        except ValueError:
            raise ValidationError("type must be IN or OUT") from None

        pid = coerce_int(product_id)
        qty = coerce_int(quantity)
        if not product_id or pid is None or qty is None or qty <= 0:
            raise ValidationError(MOVEMENT_INPUT_ERROR)

        return MovementCommand(
            product_id=pid,
            movement_type=kind,
            quantity=Quantity(qty),
            note=_optional_str(note),
        )

    @staticmethod
    def from_payload(payload: Mapping[str, object]) -> MovementCommand:
        return MovementCommand.parse(
            payload.get("type"),
            payload.get("productId"),
            payload.get("quantity"),
            payload.get("note"),
        )


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    sku: str | None
    description: str | None
    current_stock: int
    reorder_level: int
    needs_reorder: bool

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            sku=product.sku,
            description=product.description,
            current_stock=product.current_stock,
            reorder_level=product.reorder_level,
            needs_reorder=product.needs_reorder,
        )

    def to_payload(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "sku": self.sku,
            "description": self.description,
            "currentStock": self.current_stock,
            "reorderLevel": self.reorder_level,
        }


@dataclass(frozen=True)
class TransactionDTO:
    """Output: a ledger entry with the referenced product's current snapshot."""

    id: int
    type: str
    product_id: int
    quantity: int
    note: str | None
    created_at: str  # ISO 8601, UTC
    product: ProductDTO | None = None

    @staticmethod
    def from_domain(entry: TransactionEntry, product: Product | None = None) -> TransactionDTO:
        return TransactionDTO(
            id=entry.id,  # type: ignore[arg-type]
            type=entry.type.value,
            product_id=entry.product_id,
            quantity=entry.quantity,
            note=entry.note,
            created_at=entry.created_at.isoformat(),
            product=ProductDTO.from_domain(product) if product is not None else None,
        )

    def to_payload(self) -> dict:
        payload = {
            "id": self.id,
            "type": self.type,
            "productId": self.product_id,
            "quantity": self.quantity,
            "note": self.note,
            "createdAt": self.created_at,
        }
        if self.product is not None:
            payload["product"] = self.product.to_payload()
        return payload


@dataclass(frozen=True)
class MovementResultDTO:
    product: ProductDTO
    transaction: TransactionDTO

    def to_payload(self) -> dict:
        return {
            "product": self.product.to_payload(),
            "transaction": self.transaction.to_payload(),
        }


@dataclass(frozen=True)
class LedgerCheckDTO:
    product_id: int
    product_name: str
    recorded_stock: int
    replayed_stock: int
    entries: int

    @property
    def consistent(self) -> bool:
        return self.recorded_stock == self.replayed_stock


# --- Helpers -----------------------------------------------------------------


def _optional_str(raw: object) -> str | None:
    if raw is None:
        return None
    return str(raw)


def _clearable_str(fields: Mapping[str, object], key: str) -> str | None:
    if key not in fields:
        return None
    value = fields[key]
    return "" if value is None else str(value)
