"""Product CRUD operations with explicit outcomes for the HTTP layer."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError

from product_api.api.schemas.product import ProductCreate, ProductUpdate
from product_api.db.models.product import Product
from product_api.db.product_store import ProductStore
from product_api.services.outcomes import (
    ID_MISMATCH_MESSAGE,
    Conflict,
    NotFound,
    Unexpected,
    ValidationFailed,
)
from product_api.utils.product_validator import validate_product

logger = logging.getLogger(__name__)


class ProductService:
    """Validate requests, call the store and report what happened.

    Storage and runtime errors never escape: they are logged with their
    traceback and returned as ``Unexpected`` with a generic message.
    """

    def __init__(self, store: ProductStore):
        self.store = store

    def list_products(self) -> list[Product] | Unexpected:
        try:
            products = self.store.list_all()
            logger.info(f"Retrieved {len(products)} products")
            return products
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving products: {e}", exc_info=True)
            return Unexpected("An error occurred while retrieving products")
        except Exception as e:
            logger.error(f"Unexpected error retrieving products: {e}", exc_info=True)
            return Unexpected("An error occurred while retrieving products")

    def get_product(self, product_id: int) -> Product | NotFound | Unexpected:
        try:
            product = self.store.get(product_id)
            if product is None:
                logger.warning(f"Product with ID {product_id} not found")
                return NotFound(product_id)
            return product
        except Exception as e:
            logger.error(
                f"Error retrieving product with ID {product_id}: {e}", exc_info=True
            )
            return Unexpected("An error occurred while retrieving the product")

    def create_product(
        self, payload: ProductCreate
    ) -> Product | ValidationFailed | Unexpected:
        try:
            violations = validate_product(payload)
            if violations:
                logger.warning("Invalid product data provided")
                return ValidationFailed(tuple(violations))

            product = Product(
                name=payload.name,
                description=payload.description,
                price=payload.price,
                category=payload.category,
                created_at=datetime.now(timezone.utc),
            )
            product = self.store.insert(product)

            logger.info(f"Product created with ID {product.id}")
            return product
        except Exception as e:
            logger.error(f"Error creating product: {e}", exc_info=True)
            return Unexpected("An error occurred while creating the product")

    def update_product(
        self, product_id: int, payload: ProductUpdate
    ) -> None | ValidationFailed | NotFound | Conflict | Unexpected:
        try:
            if payload.id != product_id:
                logger.warning(
                    f"ID mismatch: URL ID {product_id} does not match "
                    f"product ID {payload.id}"
                )
                return ValidationFailed(message=ID_MISMATCH_MESSAGE)

            violations = validate_product(payload)
            if violations:
                logger.warning("Invalid product data provided for update")
                return ValidationFailed(tuple(violations))

            updated = self.store.update(
                product_id,
                name=payload.name,
                description=payload.description,
                price=payload.price,
                category=payload.category,
            )
            if not updated:
                logger.warning(f"Product with ID {product_id} not found for update")
                return NotFound(product_id)

            logger.info(f"Product with ID {product_id} updated successfully")
            return None
        except StaleDataError:
            return self._resolve_update_conflict(product_id)
        except Exception as e:
            logger.error(
                f"Error updating product with ID {product_id}: {e}", exc_info=True
            )
            return Unexpected("An error occurred while updating the product")

    def _resolve_update_conflict(
        self, product_id: int
    ) -> NotFound | Conflict | Unexpected:
        """Row changed under an in-flight update: report it, never retry."""
        try:
            if not self.store.exists(product_id):
                logger.warning(
                    f"Product with ID {product_id} was deleted during update"
                )
                return NotFound(product_id)
        except Exception as e:
            logger.error(
                f"Error re-checking product with ID {product_id}: {e}", exc_info=True
            )
            return Unexpected("An error occurred while updating the product")

        logger.error(f"Concurrency exception while updating product with ID {product_id}")
        return Conflict(product_id)

    def delete_product(self, product_id: int) -> None | NotFound | Unexpected:
        try:
            deleted = self.store.delete(product_id)
            if not deleted:
                logger.warning(f"Product with ID {product_id} not found for deletion")
                return NotFound(product_id)

            logger.info(f"Product with ID {product_id} deleted successfully")
            return None
        except Exception as e:
            logger.error(
                f"Error deleting product with ID {product_id}: {e}", exc_info=True
            )
            return Unexpected("An error occurred while deleting the product")
