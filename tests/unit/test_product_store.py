"""Unit tests for the SQLite-backed product store."""

from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import inspect
from sqlalchemy.orm.exc import StaleDataError

from product_api.db.models.product import Product
from product_api.db.product_store import ProductStore
from product_api.db.session import build_engine, ensure_schema


def _product(name: str = "Laptop", price: str = "1299.99") -> Product:
    return Product(
        name=name,
        description="Gaming",
        price=Decimal(price),
        category="Electronics",
        created_at=datetime.now(timezone.utc),
    )


class TestEnsureSchema:
    def test_creates_missing_file_and_table(self, tmp_path: Path):
        db_file = tmp_path / "nested" / "dir" / "products.db"
        engine = build_engine(f"sqlite:///{db_file}")

        assert ensure_schema(engine) is True
        assert db_file.exists()
        assert "products" in inspect(engine).get_table_names()
        engine.dispose()

    def test_is_idempotent(self, store: ProductStore):
        assert ensure_schema(store.engine) is True
        assert ensure_schema(store.engine) is True

    def test_failure_is_reported_not_raised(self, tmp_path: Path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        engine = build_engine(f"sqlite:///{blocker / 'products.db'}")

        assert ensure_schema(engine) is False
        engine.dispose()


class TestProductStore:
    def test_insert_assigns_sequential_ids(self, store: ProductStore):
        first = store.insert(_product("First"))
        second = store.insert(_product("Second"))

        assert first.id == 1
        assert second.id == 2

    def test_insert_ignores_caller_id(self, store: ProductStore):
        product = _product()
        product.id = 42

        stored = store.insert(product)

        assert stored.id == 1
        assert store.get(42) is None

    def test_get_returns_detached_row(self, store: ProductStore):
        created = store.insert(_product())

        found = store.get(created.id)

        assert found is not None
        assert found.name == "Laptop"
        assert found.price == Decimal("1299.99")
        assert found.created_at is not None

    def test_get_missing_returns_none(self, store: ProductStore):
        assert store.get(999) is None

    def test_list_all_in_insertion_order(self, store: ProductStore):
        for name in ("A", "B", "C"):
            store.insert(_product(name))

        assert [p.name for p in store.list_all()] == ["A", "B", "C"]

    def test_list_all_empty(self, store: ProductStore):
        assert store.list_all() == []

    def test_update_overwrites_mutable_fields_only(self, store: ProductStore):
        created = store.insert(_product())
        original_created_at = store.get(created.id).created_at

        updated = store.update(
            created.id,
            name="Laptop Pro",
            description="",
            price=Decimal("1199.99"),
            category="Computers",
        )

        assert updated is True
        found = store.get(created.id)
        assert found.id == created.id
        assert found.name == "Laptop Pro"
        assert found.description == ""
        assert found.price == Decimal("1199.99")
        assert found.category == "Computers"
        assert found.created_at == original_created_at

    def test_price_keeps_full_precision(self, store: ProductStore):
        created = store.insert(_product(price="19.999"))

        assert created.price == Decimal("19.999")
        assert store.get(created.id).price == Decimal("19.999")

    def test_update_raises_stale_data_when_row_deleted_mid_update(
        self, store: ProductStore, delete_before_flush
    ):
        created = store.insert(_product())

        with pytest.raises(StaleDataError):
            store.update(
                created.id,
                name="Laptop Pro",
                description="",
                price=Decimal("1199.99"),
                category="",
            )

        assert store.exists(created.id) is False

    def test_update_missing_returns_false(self, store: ProductStore):
        assert (
            store.update(
                7, name="x", description="", price=Decimal("1"), category=""
            )
            is False
        )

    def test_delete_and_exists(self, store: ProductStore):
        created = store.insert(_product())
        assert store.exists(created.id) is True

        assert store.delete(created.id) is True
        assert store.exists(created.id) is False
        assert store.delete(created.id) is False

    def test_ping(self, store: ProductStore):
        assert store.ping() is True
