"""Unified JSON error payloads and the exception handlers that emit them."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from regflow.core.validation import FIELDS_REQUIRED
from regflow.core.validation import MESSAGES

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
_PAYLOAD_KEYS = frozenset({"code", "message", "detail"})


def api_error(*, code: str, message: str, detail: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build the {code,message,detail} body every error response carries."""
    return {"code": code, "message": message, "detail": detail or {}}


def _is_api_error(detail: object) -> bool:
    return isinstance(detail, dict) and _PAYLOAD_KEYS <= set(detail)


async def handle_http_exception(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Pass service payloads through; wrap bare framework details as HTTP_<status>."""
    content = (
        exc.detail
        if _is_api_error(exc.detail)
        else api_error(code=f"HTTP_{exc.status_code}", message=str(exc.detail))
    )
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def handle_request_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Map unparseable request bodies onto the missing-fields 400 response."""
    return JSONResponse(
        status_code=400,
        content=api_error(
            code="VALIDATION_ERROR",
            message=MESSAGES[FIELDS_REQUIRED],
            detail={"reason": FIELDS_REQUIRED},
        ),
    )


async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort 500 for anything a service did not translate itself."""
    logger.error("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=api_error(code="INTERNAL_ERROR", message=INTERNAL_ERROR_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_exception)
