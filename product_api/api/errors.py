"""Translate service outcomes and request parsing errors into responses."""

from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from product_api.services.outcomes import (
    VALIDATION_MESSAGE,
    Conflict,
    NotFound,
    Outcome,
    Unexpected,
    ValidationFailed,
)

logger = logging.getLogger(__name__)


def outcome_response(outcome: Outcome) -> JSONResponse:
    """Build the JSON error response for a non-success service outcome."""
    if isinstance(outcome, ValidationFailed):
        content: dict = {"message": outcome.message}
        if outcome.errors:
            content["errors"] = outcome.errors_by_field()
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)

    if isinstance(outcome, NotFound):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": outcome.message},
        )

    if isinstance(outcome, Conflict):
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"message": outcome.message},
        )

    if isinstance(outcome, Unexpected):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": outcome.message},
        )

    raise TypeError(f"Unsupported outcome: {outcome!r}")


def _error_field(loc: tuple) -> str:
    # ("body", "price") -> "price"; ("path", "product_id") -> "product_id"
    # JSON decode errors carry a character offset: ("body", 9) -> "body"
    if len(loc) > 1 and isinstance(loc[1], int):
        return str(loc[0])
    parts = [str(part) for part in loc[1:]] or [str(part) for part in loc]
    return ".".join(parts) if parts else "body"


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report unparseable requests as 400 with per-field messages."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = _error_field(tuple(error.get("loc", ())))
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))

    logger.warning(f"Rejected malformed request to {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": VALIDATION_MESSAGE, "errors": errors},
    )
