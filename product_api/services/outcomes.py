"""Non-success results returned by service operations.

Service methods return one of these instead of raising, and the HTTP layer
maps each kind to a status code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from product_api.utils.product_validator import FieldViolation

VALIDATION_MESSAGE = "One or more validation errors occurred."
ID_MISMATCH_MESSAGE = "The ID in the URL must match the ID in the request body."


@dataclass(frozen=True)
class ValidationFailed:
    errors: tuple[FieldViolation, ...] = ()
    message: str = VALIDATION_MESSAGE

    def errors_by_field(self) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for violation in self.errors:
            grouped.setdefault(violation.field, []).append(violation.message)
        return grouped


@dataclass(frozen=True)
class NotFound:
    product_id: int

    @property
    def message(self) -> str:
        return f"Product with ID {self.product_id} was not found"


@dataclass(frozen=True)
class Conflict:
    product_id: int

    @property
    def message(self) -> str:
        return f"Product with ID {self.product_id} was modified concurrently"


@dataclass(frozen=True)
class Unexpected:
    message: str = field(default="An unexpected error occurred")


Outcome = Union[ValidationFailed, NotFound, Conflict, Unexpected]
OUTCOME_TYPES = (ValidationFailed, NotFound, Conflict, Unexpected)


def is_outcome(value: object) -> bool:
    return isinstance(value, OUTCOME_TYPES)
