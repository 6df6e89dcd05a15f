"""CRUD endpoints for the product catalog."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from product_api.api.dependencies.services import get_product_service
from product_api.api.errors import outcome_response
from product_api.api.schemas.product import ProductCreate, ProductRead, ProductUpdate
from product_api.services.outcomes import is_outcome
from product_api.services.product_service import ProductService

router = APIRouter()

MESSAGE_SCHEMA = {
    "content": {
        "application/json": {
            "schema": {
                "type": "object",
                "properties": {"message": {"type": "string"}},
            }
        }
    }
}


@router.get(
    "",
    summary="List all products",
    response_model=list[ProductRead],
    responses={500: {"description": "Storage error", **MESSAGE_SCHEMA}},
)
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductRead] | JSONResponse:
    """Return every product in storage order."""
    result = service.list_products()
    if is_outcome(result):
        return outcome_response(result)
    return [ProductRead.model_validate(p) for p in result]


@router.get(
    "/{product_id}",
    summary="Get a product by ID",
    response_model=ProductRead,
    responses={
        404: {"description": "Product not found", **MESSAGE_SCHEMA},
        500: {"description": "Storage error", **MESSAGE_SCHEMA},
    },
)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> ProductRead | JSONResponse:
    result = service.get_product(product_id)
    if is_outcome(result):
        return outcome_response(result)
    return ProductRead.model_validate(result)


@router.post(
    "",
    summary="Create a product",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductRead,
    responses={
        400: {"description": "Invalid product data"},
        500: {"description": "Storage error", **MESSAGE_SCHEMA},
    },
)
def create_product(
    payload: ProductCreate,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
) -> ProductRead | JSONResponse:
    """Persist a new product; the server assigns ``id`` and ``createdAt``."""
    result = service.create_product(payload)
    if is_outcome(result):
        return outcome_response(result)

    response.headers["Location"] = str(
        request.url_for("get_product", product_id=result.id).path
    )
    return ProductRead.model_validate(result)


@router.put(
    "/{product_id}",
    summary="Update a product",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Invalid product data or ID mismatch"},
        404: {"description": "Product not found", **MESSAGE_SCHEMA},
        409: {"description": "Concurrent modification", **MESSAGE_SCHEMA},
        500: {"description": "Storage error", **MESSAGE_SCHEMA},
    },
)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Replace name, description, price and category of an existing product.

    The body must carry the same ``id`` as the URL.
    """
    result = service.update_product(product_id, payload)
    if is_outcome(result):
        return outcome_response(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    summary="Delete a product",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        404: {"description": "Product not found", **MESSAGE_SCHEMA},
        500: {"description": "Storage error", **MESSAGE_SCHEMA},
    },
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Permanently remove a product."""
    result = service.delete_product(product_id)
    if is_outcome(result):
        return outcome_response(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
