"""SQLAlchemy model for product records."""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Column, Integer, String
from sqlalchemy.types import DateTime, TypeDecorator

from product_api.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DecimalText(TypeDecorator):
    """Decimal persisted as its exact text form, with no fixed scale."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(str(value)))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    description = Column(String(1000), nullable=False, default="")
    price = Column(DecimalText(64), nullable=False)
    category = Column(String(100), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, name={self.name!r}, price={self.price!r})"
