"""Storage client for product rows."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal

from sqlalchemy import select, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from product_api.db.models.product import Product
from product_api.db.session import build_engine, build_session_factory


class ProductStore:
    """Durable keyed storage for products.

    Every method runs in its own session and commits (or rolls back) before
    returning, so each call is a single atomic unit. Rows handed back are
    detached from their session. The store enforces no business rules.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> ProductStore:
        return cls(build_session_factory(build_engine(database_url, echo=echo)))

    @property
    def engine(self) -> Engine:
        return self._session_factory.kw["bind"]

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def insert(self, product: Product) -> Product:
        """Persist a new row; the database assigns its id."""
        product.id = None
        with self._session() as session:
            session.add(product)
            session.flush()
            session.refresh(product)
        return product

    def get(self, product_id: int) -> Product | None:
        with self._session() as session:
            return session.get(Product, product_id)

    def list_all(self) -> list[Product]:
        with self._session() as session:
            return list(session.scalars(select(Product).order_by(Product.id)).all())

    def exists(self, product_id: int) -> bool:
        with self._session() as session:
            found = session.scalar(
                select(Product.id).where(Product.id == product_id).limit(1)
            )
            return found is not None

    def update(
        self,
        product_id: int,
        *,
        name: str,
        description: str,
        price: Decimal,
        category: str,
    ) -> bool:
        """Overwrite the mutable fields of an existing row in place.

        Returns False when no row has ``product_id``. ``id`` and
        ``created_at`` are never touched. A row deleted between the load and
        the flush raises ``sqlalchemy.orm.exc.StaleDataError``.
        """
        with self._session() as session:
            existing = session.get(Product, product_id)
            if existing is None:
                return False

            existing.name = name
            existing.description = description
            existing.price = price
            existing.category = category
            session.flush()
        return True

    def delete(self, product_id: int) -> bool:
        with self._session() as session:
            existing = session.get(Product, product_id)
            if existing is None:
                return False
            session.delete(existing)
        return True

    def ping(self) -> bool:
        """Run a trivial query to confirm the database is reachable."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
        return True
