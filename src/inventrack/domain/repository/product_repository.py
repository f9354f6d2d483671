"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer and are only reachable through a UnitOfWork.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from inventrack.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Reserve the next unique product ID. IDs are never reused."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product ordered by ID ascending."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning an ID if it has none."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product record."""

    @abstractmethod
    def purge(self) -> None:
        """Remove every product. Administrative use only."""
