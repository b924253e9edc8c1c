"""
Middleware configuration for the application.
Includes Correlation ID setup and request logging middleware.
"""

import time
from typing import Callable

import structlog
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from wedding_api.config import Settings

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log requests and responses with timing."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        structlog.contextvars.clear_contextvars()

        logger.info(
            "Request started",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            # The traceback is logged once, by the global exception handler
            logger.error(
                "Request failed",
                error_type=type(exc).__name__,
                method=request.method,
                path=request.url.path,
                process_time_ms=round((time.time() - start_time) * 1000, 2),
            )
            raise

        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time_ms=round((time.time() - start_time) * 1000, 2),
        )
        return response


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Setup all middleware for the application.

    Starlette runs middleware in reverse order of addition, so the correlation
    id middleware is added last to wrap everything else.
    """
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
