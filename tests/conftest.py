"""Shared fixtures: an isolated SQLite database and app per test."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import delete, event

from product_api.core.config import Settings, get_settings
from product_api.db.models.product import Product
from product_api.db.product_store import ProductStore
from product_api.db.session import ensure_schema
from product_api.main import create_app
from product_api.services.product_service import ProductService


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'products.db'}"


@pytest.fixture
def settings(database_url: str) -> Settings:
    return Settings(database_url=database_url, log_level="DEBUG")


@pytest.fixture
def store(database_url: str) -> Iterator[ProductStore]:
    product_store = ProductStore.from_url(database_url)
    assert ensure_schema(product_store.engine)
    yield product_store
    product_store.engine.dispose()


@pytest.fixture
def service(store: ProductStore) -> ProductService:
    return ProductService(store)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture(name="client")
def client_fixture(app: FastAPI) -> Iterator[TestClient]:
    """Test client with the lifespan (schema creation) running."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def laptop() -> dict:
    return {
        "name": "Laptop",
        "description": "Gaming",
        "price": 1299.99,
        "category": "Electronics",
    }


@pytest.fixture
def delete_before_flush(store: ProductStore) -> Iterator[None]:
    """Delete any modified product from another connection right before flush.

    Simulates a concurrent DELETE landing between the load and the UPDATE of
    ``ProductStore.update``.
    """
    factory = store._session_factory

    def remove_dirty_rows(session, flush_context, instances):
        for obj in list(session.dirty):
            if isinstance(obj, Product):
                with store.engine.begin() as conn:
                    conn.execute(delete(Product).where(Product.id == obj.id))

    event.listen(factory, "before_flush", remove_dirty_rows)
    yield
    event.remove(factory, "before_flush", remove_dirty_rows)
