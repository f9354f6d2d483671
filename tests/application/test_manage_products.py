"""Integration tests for the product create/update/delete/list use cases."""

import pytest

from inventrack.application.add_product import AddProductHandler
from inventrack.application.delete_product import DeleteProductHandler
from inventrack.application.dto import CreateProductCommand, MovementCommand, UpdateProductCommand
from inventrack.application.list_products import ListProductsHandler
from inventrack.application.record_movement import RecordMovementHandler
from inventrack.application.update_product import UpdateProductHandler
from inventrack.domain.exceptions import ProductNotFoundError, ValidationError
from tests.fakes import FakeState, uow_factory


def _add(state: FakeState, name: str, stock: int = 0, **kwargs):
    return AddProductHandler(uow_factory(state)).handle(
        CreateProductCommand(name=name, current_stock=stock, **kwargs)
    )


class TestAddProduct:

    def test_assigns_sequential_ids(self):
        state = FakeState()
        first = _add(state, "Pens")
        second = _add(state, "Notebooks")
        assert (first.id, second.id) == (1, 2)

    def test_missing_name_rejected(self):
        state = FakeState()
        with pytest.raises(ValidationError, match="Name is required"):
            AddProductHandler(uow_factory(state)).handle(CreateProductCommand.from_payload({"sku": "X"}))
        assert state.products == {}

    def test_from_payload_coerces_numbers(self):
        state = FakeState()
        dto = AddProductHandler(uow_factory(state)).handle(
            CreateProductCommand.from_payload(
                {"name": "Pens", "sku": "PEN-001", "currentStock": "100", "reorderLevel": 10}
            )
        )
        assert dto.current_stock == 100
        assert dto.reorder_level == 10
        assert state.products[dto.id].initial_stock == 100

    def test_ids_not_reused_after_delete(self):
        state = FakeState()
        first = _add(state, "Pens")
        DeleteProductHandler(uow_factory(state)).handle(first.id)
        assert _add(state, "Notebooks").id == 2


class TestUpdateProduct:

    def test_partial_update(self):
        state = FakeState()
        dto = _add(state, "Pens", 5, sku="PEN-001", description="Blue")
        updated = UpdateProductHandler(uow_factory(state)).handle(
            UpdateProductCommand.from_payload(dto.id, {"name": "Pens (blue)", "reorderLevel": 3})
        )
        assert updated.name == "Pens (blue)"
        assert updated.reorder_level == 3
        assert updated.sku == "PEN-001"
        assert updated.description == "Blue"
        assert updated.current_stock == 5

    def test_empty_string_clears_optional_fields(self):
        state = FakeState()
        dto = _add(state, "Pens", sku="PEN-001")
        updated = UpdateProductHandler(uow_factory(state)).handle(
            UpdateProductCommand.from_payload(dto.id, {"sku": ""})
        )
        assert updated.sku is None

    def test_current_stock_cannot_be_set(self):
        state = FakeState()
        dto = _add(state, "Pens", 5)
        with pytest.raises(ValidationError, match="only be changed through stock movements"):
            UpdateProductCommand.from_payload(dto.id, {"currentStock": 500})
        assert state.products[dto.id].current_stock == 5

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError, match="Unknown product field"):
            UpdateProductCommand.from_payload(1, {"colour": "red"})

    def test_missing_product(self):
        state = FakeState()
        with pytest.raises(ProductNotFoundError, match="Product not found"):
            UpdateProductHandler(uow_factory(state)).handle(UpdateProductCommand(product_id=9, name="X"))

    def test_nothing_to_update(self):
        state = FakeState()
        dto = _add(state, "Pens")
        with pytest.raises(ValidationError, match="Nothing to update"):
            UpdateProductHandler(uow_factory(state)).handle(UpdateProductCommand(product_id=dto.id))


class TestDeleteProduct:

    def test_delete_without_history(self):
        state = FakeState()
        dto = _add(state, "Pens")
        DeleteProductHandler(uow_factory(state)).handle(dto.id)
        assert ListProductsHandler(uow_factory(state)).handle() == []

    def test_delete_missing(self):
        state = FakeState()
        with pytest.raises(ProductNotFoundError):
            DeleteProductHandler(uow_factory(state)).handle(1)

    def test_delete_with_ledger_history_refused(self):
        state = FakeState()
        dto = _add(state, "Pens", 5)
        RecordMovementHandler(uow_factory(state)).handle(MovementCommand.parse("OUT", dto.id, 2))

        with pytest.raises(ValidationError, match="has ledger entries"):
            DeleteProductHandler(uow_factory(state)).handle(dto.id)
        assert dto.id in state.products


class TestListProducts:

    def test_ordered_by_id(self):
        state = FakeState()
        for name in ("Staplers", "Pens", "Notebooks"):
            _add(state, name)
        names = [p.name for p in ListProductsHandler(uow_factory(state)).handle()]
        assert names == ["Staplers", "Pens", "Notebooks"]

    def test_get(self):
        state = FakeState()
        dto = _add(state, "Pens", 3)
        assert ListProductsHandler(uow_factory(state)).get(dto.id).current_stock == 3
        with pytest.raises(ProductNotFoundError):
            ListProductsHandler(uow_factory(state)).get(99)
