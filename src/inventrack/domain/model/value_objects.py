"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from inventrack.domain.exceptions import ValidationError


def coerce_int(raw: object) -> int | None:
    """Coerce a loosely-typed number (``7``, ``"7"``, ``7.0``) to ``int``.

    Returns None when *raw* is not an integral number. Booleans are not
    accepted even though ``bool`` subclasses ``int``.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite() or value != value.to_integral_value():
        return None
    return int(value)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Movements always carry a magnitude; the direction comes from the
    movement type.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StockLevel:
    """A non-negative integer amount of stock."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Stock level must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError("Stock level cannot be negative")

    @staticmethod
    def of(raw: object, field_name: str = "stock level") -> StockLevel:
        """Factory that coerces a loosely-typed number, defaulting None to 0."""
        if raw is None or raw == "":
            return StockLevel(0)
        value = coerce_int(raw)
        if value is None or value < 0:
            raise ValidationError(f"{field_name} must be a non-negative integer")
        return StockLevel(value)

    def __str__(self) -> str:
        return str(self.value)
