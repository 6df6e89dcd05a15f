"""FastAPI application bootstrap."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.responses import RedirectResponse

from product_api.api.errors import request_validation_handler
from product_api.api.routers import health, products
from product_api.core.config import Settings, get_settings
from product_api.core.logging import configure_logging
from product_api.db.product_store import ProductStore
from product_api.db.session import ensure_schema

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "A RESTful API for managing products with full CRUD operations. "
    "Built with FastAPI, SQLAlchemy, and SQLite."
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Storage problems are logged, not fatal; requests report them as 500s
    ensure_schema(app.state.product_store.engine)
    yield
    app.state.product_store.engine.dispose()


def create_app(
    settings: Settings | None = None, store: ProductStore | None = None
) -> FastAPI:
    """Instantiate the FastAPI app with its storage client and routers."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    try:
        app = FastAPI(
            title=settings.app_name,
            version=settings.app_version,
            description=DESCRIPTION,
            contact={"name": "API Support", "email": "support@example.com"},
            lifespan=lifespan,
        )

        app.state.settings = settings
        app.state.product_store = store or ProductStore.from_url(
            settings.database_url, echo=settings.database_echo
        )

        if settings.https_port:
            app.add_middleware(HTTPSRedirectMiddleware)

        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials="*" not in settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        app.add_exception_handler(RequestValidationError, request_validation_handler)

        app.include_router(health.router)
        app.include_router(products.router, prefix="/products", tags=["products"])

        @app.get("/", include_in_schema=False)
        async def root() -> RedirectResponse:
            return RedirectResponse(url=app.docs_url or "/docs")

    except Exception as e:
        logger.critical(f"Application startup failed: {e}", exc_info=True)
        raise

    logger.info(f"{settings.app_name} configured with {settings.database_url}")
    return app


app = create_app()
