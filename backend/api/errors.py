"""Turn pydantic validation failures into the 400 payload clients expect."""

import logging
from typing import Any, Sequence

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from models.responses import FieldError, ValidationErrorResponse

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


def _field_path(loc: Sequence[Any]) -> str:
    """("body", "mentors", 0, "name") -> "mentors[0].name"."""
    parts = list(loc)
    if parts and parts[0] == "body":
        parts = parts[1:]
    path = ""
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "body"


def format_validation_errors(errors: Sequence[dict[str, Any]]) -> ValidationErrorResponse:
    field_errors = []
    for err in errors:
        message = str(err.get("msg", "Invalid value"))
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        field = "body" if err.get("type") == "json_invalid" else _field_path(err.get("loc", ()))
        field_errors.append(FieldError(field=field, message=message))
    return ValidationErrorResponse(errors=field_errors)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    payload = format_validation_errors(exc.errors())
    logger.info("Rejected %s %s: %d invalid field(s)", request.method, request.url.path, len(payload.errors))
    return JSONResponse(status_code=400, content=payload.model_dump())
