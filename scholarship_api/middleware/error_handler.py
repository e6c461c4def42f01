from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Something went wrong"


def _status_code_for(exc: Exception) -> int:
    for attr in ("status_code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and 100 <= value <= 599:
            return value
    return 500


def _message_for(exc: Exception) -> str:
    detail = getattr(exc, "detail", None)
    if isinstance(detail, str) and detail:
        return detail
    return str(exc) or DEFAULT_MESSAGE


def error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any exception as ``{"error": <message>}`` with a matching status."""
    status_code = _status_code_for(exc)
    message = _message_for(exc)

    if status_code >= 500:
        logger.error(
            f"{type(exc).__name__} while handling request: {message}",
            exc_info=(type(exc), exc, exc.__traceback__),
        )
    else:
        logger.warning(f"Request failed with {status_code}: {message}")

    headers = getattr(exc, "headers", None)
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        exc = StarletteHTTPException(405, detail="invalid method", headers=exc.headers)
    return error_handler(request, exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", DEFAULT_MESSAGE) if errors else DEFAULT_MESSAGE
    return error_handler(request, StarletteHTTPException(400, detail=message))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return error_handler(request, exc)
