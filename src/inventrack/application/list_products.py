"""Application service: List Products use case (query)."""

from __future__ import annotations

from inventrack.application.dto import ProductDTO
from inventrack.domain.exceptions import ProductNotFoundError
from inventrack.domain.repository.unit_of_work import UnitOfWorkFactory


class ListProductsHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self) -> list[ProductDTO]:
        with self._uow_factory() as uow:
            products = uow.products.list_all()
        return [ProductDTO.from_domain(p) for p in products]

    def get(self, product_id: int) -> ProductDTO:
        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return ProductDTO.from_domain(product)
