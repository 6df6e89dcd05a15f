"""Validate product payloads and collect field constraint violations."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

NAME_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
CATEGORY_MAX_LENGTH = 100

# Smallest price a product may carry
MIN_PRICE = Decimal("0.01")


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def validate_product(payload: Any) -> list[FieldViolation]:
    """Check every field rule and return all violations found.

    ``payload`` is anything exposing ``name``, ``description``, ``price`` and
    ``category`` attributes. An empty list means the payload is valid. The
    server-controlled ``id`` and ``created_at`` are not checked.
    """
    violations: list[FieldViolation] = []

    name = _text(getattr(payload, "name", None))
    if not name.strip():
        violations.append(FieldViolation("name", "Product name is required"))
    elif len(name) > NAME_MAX_LENGTH:
        violations.append(
            FieldViolation(
                "name", f"Product name cannot exceed {NAME_MAX_LENGTH} characters"
            )
        )

    description = _text(getattr(payload, "description", None))
    if len(description) > DESCRIPTION_MAX_LENGTH:
        violations.append(
            FieldViolation(
                "description",
                f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters",
            )
        )

    price = getattr(payload, "price", None)
    if price is None or Decimal(str(price)) < MIN_PRICE:
        violations.append(FieldViolation("price", "Price must be greater than 0"))

    category = _text(getattr(payload, "category", None))
    if len(category) > CATEGORY_MAX_LENGTH:
        violations.append(
            FieldViolation(
                "category",
                f"Category cannot exceed {CATEGORY_MAX_LENGTH} characters",
            )
        )

    return violations
