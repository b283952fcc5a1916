"""
bpm_reducer.api.errors

Exception handlers translating failures into uniform JSON error bodies.

Responsibilities:
- Map core `DiagramError` kinds to 400 responses with structured details.
- Map request validation failures to 400 with a field -> message map.
- Hide unexpected exceptions behind a generic 500 (logged with traceback).
"""

from __future__ import annotations

from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from bpm_reducer.api.schemas import ErrorResponse
from bpm_reducer.core.errors import DiagramError
from bpm_reducer.observability.logging import get_logger

log = get_logger(__name__)

VALIDATION_ERROR = "Validation Error"
REQUEST_VALIDATION_FAILED = "Request validation failed"
INTERNAL_SERVER_ERROR = "Internal Server Error"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while processing the request"


def error_response(
    *, status: int, error: str, message: str, details: dict[str, Any] | None = None
) -> JSONResponse:
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=status,
        error=error,
        message=message,
        details=details,
    )
    return JSONResponse(status_code=status, content=jsonable_encoder(body))


async def diagram_error_handler(_: Request, exc: DiagramError) -> JSONResponse:
    return error_response(
        status=HTTP_400_BAD_REQUEST,
        error=exc.kind,
        message=str(exc),
        details=exc.context,
    )


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    details: dict[str, Any] = {}
    for err in exc.errors():
        # Drop the leading "body" segment so keys read like "nodes.0.id".
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        details[".".join(loc) or "body"] = err.get("msg", "invalid value")
    log.warning("request_validation_failed", details=details)
    return error_response(
        status=HTTP_400_BAD_REQUEST,
        error=VALIDATION_ERROR,
        message=REQUEST_VALIDATION_FAILED,
        details=details,
    )


async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(
        status=exc.status_code,
        error=_reason(exc.status_code),
        message=str(exc.detail),
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unexpected_error_handler(_: Request, exc: Exception) -> JSONResponse:
    log.error("unexpected_error", exc_info=exc)
    return error_response(
        status=HTTP_500_INTERNAL_SERVER_ERROR,
        error=INTERNAL_SERVER_ERROR,
        message=UNEXPECTED_ERROR_MESSAGE,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DiagramError, diagram_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unexpected_error_handler)


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


# --- Module Notes -----------------------------------------------------------
# The `Exception` handler runs in Starlette's ServerErrorMiddleware, which re-raises
# after responding; test clients must not propagate app exceptions to assert on it.
