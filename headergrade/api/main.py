"""Main FastAPI application with middleware, exception handlers, and routing."""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from headergrade import __version__
from headergrade.api.metrics import REQUEST_COUNT, REQUEST_DURATION
from headergrade.api.routers import health, scan
from headergrade.api.schemas import ErrorDetail, ErrorResponse
from headergrade.config import settings

logger = logging.getLogger(__name__)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware to collect Prometheus metrics."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start_time = time.time()

        response = await call_next(request)

        duration = time.time() - start_time
        endpoint = request.url.path
        method = request.method
        status_code = str(response.status_code)

        REQUEST_COUNT.labels(method=method, endpoint=endpoint, status=status_code).inc()
        REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(duration)

        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager."""
    logger.info("Starting Headergrade API")
    yield
    logger.info("Shutting down Headergrade API")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title="Headergrade API",
        description="Security header grading for crawled pages",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Prometheus metrics
    app.add_middleware(PrometheusMiddleware)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request, exc: HTTPException
    ) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail), "http_error")

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return error_response(
            422, "Validation error", "validation_error", details=jsonable_errors(exc)
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Log unexpected failures without exposing internals to the client."""
        logger.exception("Unhandled exception: %s", exc)
        return error_response(500, "Internal server error", "internal_error")

    # Metrics endpoint
    @app.get(settings.metrics_endpoint)
    async def metrics() -> Response:
        """Prometheus metrics endpoint."""
        return Response(
            content=generate_latest(),
            media_type="text/plain; version=0.0.4; charset=utf-8",
        )

    # Include routers
    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(scan.router, prefix=settings.api_prefix)

    return app


def error_response(
    code: int, message: str, error_type: str, details: list[dict] | None = None
) -> JSONResponse:
    """JSON response wrapping an error in the {"error": {...}} envelope."""
    body = ErrorResponse(
        error=ErrorDetail(code=code, message=message, type=error_type, details=details)
    )
    return JSONResponse(status_code=code, content=body.model_dump(exclude_none=True))


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors reduced to JSON-safe fields."""
    return [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg"),
            "type": error.get("type"),
        }
        for error in exc.errors()
    ]


# Create app instance
app = create_app()
