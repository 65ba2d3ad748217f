"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from legislator_lookup import __version__
from legislator_lookup.core.config import get_settings
from legislator_lookup.core.logging import setup_logging
from legislator_lookup.services.legislator_lookup_service import UNEXPECTED_ERROR_MESSAGE, LookupFailure

INVALID_BODY_MESSAGE = "Invalid request body"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Configure logging on startup."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)
    logger.info("Legislator lookup {} starting ({})", __version__, settings.environment)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Legislator Lookup API",
        description="Resolve a postal address to its state legislators and their social-media handles",
        version=__version__,
        lifespan=lifespan,
    )

    # Register exception handlers
    @app.exception_handler(LookupFailure)
    async def lookup_failure_handler(request: Request, exc: LookupFailure) -> JSONResponse:
        return JSONResponse(
            status_code=exc.http_status,
            content={"error": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"error": INVALID_BODY_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": UNEXPECTED_ERROR_MESSAGE},
        )

    # Register middleware and routers
    from legislator_lookup.api.router import create_router, setup_middleware

    setup_middleware(app, settings)
    app.include_router(create_router(settings))

    return app
