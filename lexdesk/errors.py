"""Helpers for turning failures into the ``{"error": ...}`` response body."""
from typing import Any, Dict, List, Sequence

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException


def integrity_error_status(exc: IntegrityError) -> int:
    """Classify a database integrity failure.

    Foreign key failures mean a referenced row is missing (404); unique
    and not-null failures are conflicts with existing data (409).
    """
    message = str(getattr(exc, "orig", exc)).lower()
    if "foreign key" in message:
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_409_CONFLICT


def describe_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    missing: List[str] = []
    invalid: List[str] = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "form")]
        field = ".".join(location) or "body"
        if error.get("type") == "json_invalid":
            return "Invalid request body"
        if error.get("type") == "missing":
            missing.append(field)
        else:
            invalid.append(field)

    if missing:
        return f"{_join(missing)} {'is' if len(missing) == 1 else 'are'} required"
    return f"Invalid value for {_join(invalid)}"


def _join(fields: List[str]) -> str:
    fields = list(dict.fromkeys(fields))
    if len(fields) == 1:
        return fields[0]
    return ", ".join(fields[:-1]) + " and " + fields[-1]


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": describe_validation_errors(exc.errors())},
    )
