"""Dependencies resolving the storage client injected at startup."""

from fastapi import Depends, Request

from product_api.db.product_store import ProductStore
from product_api.services.product_service import ProductService


def get_store(request: Request) -> ProductStore:
    """FastAPI dependency returning the app's ProductStore instance."""
    return request.app.state.product_store


def get_product_service(store: ProductStore = Depends(get_store)) -> ProductService:
    return ProductService(store)
