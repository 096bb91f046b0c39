"""JSON envelope shared by every till-salary response: `{"message": ..., "data": ...}`."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

WRITE_ERROR_MESSAGE = "Error while writing data"


class ApiResponse(BaseModel):
    message: str
    # Dumped by runtime type so nested payload models keep all their fields.
    data: Any = None


def _dump_envelope(message: str, data: Any) -> dict[str, Any]:
    return ApiResponse(message=message, data=data).model_dump(mode="json", exclude_none=True)


def envelope_response(
    status_code: int,
    message: str,
    data: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """
    Render one envelope. A payload that cannot be serialized never escapes as a
    500: it is logged and answered with 400 and a generic message.
    """
    try:
        content = _dump_envelope(message, data)
    except (TypeError, ValueError):
        logger.exception("Error while writing response message %r", message)
        return JSONResponse(status_code=400, content={"message": WRITE_ERROR_MESSAGE})

    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return envelope_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def _validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return envelope_response(400, message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
