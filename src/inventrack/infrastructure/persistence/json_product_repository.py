"""JSON-document-backed implementation of ProductRepository.

Operates on the working copy owned by a JsonUnitOfWork; nothing reaches
disk until the unit of work commits.
"""

from __future__ import annotations

from inventrack.domain.model.product import Product
from inventrack.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, document: dict) -> None:
        self._document = document

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        sequences = self._document["sequences"]
        sequences["product"] += 1
        return sequences["product"]

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._document["products"]:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        products = [self._to_domain(raw) for raw in self._document["products"]]
        return sorted(products, key=lambda p: p.id)

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self.next_id()

        records = self._document["products"]
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                return
        records.append(self._to_raw(product))

    def delete(self, product_id: int) -> None:
        self._document["products"] = [
            raw for raw in self._document["products"] if raw["id"] != product_id
        ]

    def purge(self) -> None:
        self._document["products"] = []

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "sku": product.sku,
            "description": product.description,
            "current_stock": product.current_stock,
            "reorder_level": product.reorder_level,
            "initial_stock": product.initial_stock,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            sku=raw.get("sku"),
            description=raw.get("description"),
            current_stock=raw["current_stock"],
            reorder_level=raw.get("reorder_level", 0),
            initial_stock=raw.get("initial_stock", 0),
        )
