from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .middleware.error_handler import (
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from .middleware.request_logging import LoggingMiddleware
from .routes.system import router as system_router
from .scholarships import router as scholarships_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Scholarship API",
        description="CRUD over an in-memory collection of scholarship records.",
        version="0.1.0",
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.add_middleware(LoggingMiddleware)

    app.include_router(scholarships_router)
    app.include_router(system_router)
    return app


app = create_app()
