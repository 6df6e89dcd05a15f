"""Pydantic models describing Product payloads."""

from datetime import datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class ProductBase(BaseModel):
    """Fields a client may send.

    Length and range rules are not enforced here; they are checked by
    ``validate_product`` so every violation can be reported together.
    """

    name: str = ""
    description: str = ""
    price: Decimal = Field(Decimal("0"), allow_inf_nan=False)
    category: str = ""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("name", "description", "category", mode="before")
    @classmethod
    def null_as_empty(cls, v: str | None) -> str:
        """Optional text fields sent as null are stored as empty strings."""
        return "" if v is None else v


class ProductCreate(ProductBase):
    """Payload for POST /products."""

    # Ignored on purpose: the database assigns the id
    id: int | None = None


class ProductUpdate(ProductBase):
    """Payload for PUT /products/{id}; ``id`` must match the route."""

    id: int | None = None


class ProductRead(BaseModel):
    id: int
    name: str
    description: str
    price: Decimal
    category: str
    created_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @field_serializer("price")
    def serialize_price(self, value: Decimal) -> float:
        """Emit price as a JSON number rather than a string."""
        return float(value)

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        """Convert datetime to ISO format string in UTC."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat()
