from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per request and tags it with a correlation id.

    The id is taken from the incoming ``X-Correlation-ID`` header when present,
    otherwise generated, and is echoed back on the response.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception(
                f"[{correlation_id}] {request.method} {request.url.path} failed after {elapsed_ms:.1f}ms"
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"[{correlation_id}] {request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
