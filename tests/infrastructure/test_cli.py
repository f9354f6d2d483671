"""End-to-end tests for the click CLI against a temporary store."""

import pytest
from click.testing import CliRunner

from inventrack.infrastructure.cli.main import cli
from inventrack.infrastructure.config import settings


@pytest.fixture(autouse=True)
def temp_store(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DATA_DIR", tmp_path)
    monkeypatch.setattr(settings, "STORE_FILE", "inventory.json")
    return tmp_path / "inventory.json"


@pytest.fixture
def runner():
    return CliRunner()


def _invoke(runner, *args):
    return runner.invoke(cli, list(args))


class TestProductCommands:

    def test_add_and_list(self, runner, temp_store):
        result = _invoke(runner, "product", "add", "--name", "Pens", "--sku", "PEN-001", "--stock", "100")
        assert result.exit_code == 0, result.output
        assert "Product #1 'Pens' added with stock 100" in result.output
        assert temp_store.exists()

        result = _invoke(runner, "product", "list")
        assert result.exit_code == 0
        assert "PEN-001" in result.output
        assert "100" in result.output

    def test_list_empty(self, runner):
        result = _invoke(runner, "product", "list")
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_update_and_delete(self, runner):
        _invoke(runner, "product", "add", "--name", "Pens")
        result = _invoke(runner, "product", "update", "--id", "1", "--name", "Gel pens")
        assert result.exit_code == 0
        assert "'Gel pens' updated" in result.output

        result = _invoke(runner, "product", "delete", "--id", "1")
        assert result.exit_code == 0
        assert "Product #1 deleted" in result.output

    def test_delete_missing_product(self, runner):
        result = _invoke(runner, "product", "delete", "--id", "7")
        assert result.exit_code == 1
        assert "Product not found" in result.output


class TestStockCommands:

    def test_in_then_out(self, runner):
        _invoke(runner, "product", "add", "--name", "Pens", "--stock", "10")

        result = _invoke(runner, "stock", "in", "--product-id", "1", "--quantity", "5", "--note", "delivery")
        assert result.exit_code == 0, result.output
        assert "IN 5 of 'Pens' (stock now 15)" in result.output

        result = _invoke(runner, "stock", "out", "--product-id", "1", "--quantity", "15")
        assert result.exit_code == 0
        assert "(stock now 0)" in result.output

    def test_out_beyond_stock(self, runner):
        _invoke(runner, "product", "add", "--name", "Pens", "--stock", "10")
        result = _invoke(runner, "stock", "out", "--product-id", "1", "--quantity", "11")
        assert result.exit_code == 1
        assert "Insufficient stock" in result.output

    def test_non_positive_quantity(self, runner):
        _invoke(runner, "product", "add", "--name", "Pens")
        result = _invoke(runner, "stock", "in", "--product-id", "1", "--quantity", "0")
        assert result.exit_code == 1
        assert "Valid productId and positive quantity required" in result.output

    def test_unknown_product(self, runner):
        result = _invoke(runner, "stock", "in", "--product-id", "3", "--quantity", "1")
        assert result.exit_code == 1
        assert "Product not found" in result.output


class TestLedgerCommands:

    def test_transaction_list_and_verify(self, runner):
        _invoke(runner, "product", "add", "--name", "Pens", "--stock", "10")
        _invoke(runner, "stock", "out", "--product-id", "1", "--quantity", "4", "--note", "order 17")

        result = _invoke(runner, "transaction", "list")
        assert result.exit_code == 0
        assert "OUT" in result.output
        assert "order 17" in result.output

        result = _invoke(runner, "ledger", "verify")
        assert result.exit_code == 0
        assert "Ledger consistent for 1 product(s)." in result.output

    def test_seed_requires_confirmation(self, runner):
        result = runner.invoke(cli, ["seed"], input="n\n")
        assert result.exit_code == 1

        result = _invoke(runner, "seed", "--yes")
        assert result.exit_code == 0
        assert "Seed finished: 3 products." in result.output

        result = _invoke(runner, "product", "list")
        assert "Staplers" in result.output

    def test_status(self, runner, temp_store):
        result = _invoke(runner, "status")
        assert result.exit_code == 0
        assert "status: ok" in result.output
        assert str(temp_store) in result.output

    def test_corrupt_store(self, runner, temp_store):
        temp_store.write_text("garbage", encoding="utf-8")
        result = _invoke(runner, "product", "list")
        assert result.exit_code == 1
        assert "Could not read" in result.output
