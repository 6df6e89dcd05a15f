"""Simple health and readiness endpoints."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from product_api.api.dependencies.services import get_store
from product_api.db.product_store import ProductStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])

SERVICE_NAME = "product-crud-api"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("", summary="Liveness probe")
async def live() -> dict[str, str]:
    """Indicates API process is running.

    Does not touch the database, so it stays green while storage is down.
    """
    return {"status": "healthy", "service": SERVICE_NAME, "timestamp": _now()}


@router.get("/ready", summary="Readiness probe")
def ready(store: ProductStore = Depends(get_store)) -> dict[str, Any]:
    """Check that the products database answers a trivial query."""
    checks: dict[str, Any] = {
        "status": "ok",
        "service": SERVICE_NAME,
        "timestamp": _now(),
        "checks": {},
    }

    try:
        store.ping()
        checks["checks"]["database"] = {
            "status": "healthy",
            "message": "Database connection successful",
        }
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}", exc_info=True)
        checks["checks"]["database"] = {
            "status": "unhealthy",
            "message": "Database connection failed",
        }
        checks["status"] = "unhealthy"
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=checks,
        ) from e

    return checks
