"""FastAPI application factory for the GreenPro product registration API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from greenpro.config import settings
from greenpro.database.engine import engine, sequence_engine
from greenpro.exceptions import AppException, InternalServerException
from greenpro.rate_limit import limiter

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("GreenPro API starting (environment=%s)", settings.environment)
    yield
    await engine.dispose()
    await sequence_engine.dispose()
    logger.info("GreenPro API stopped")


def configure_logging() -> None:
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


def error_body(
    request: Request, code: str, message: str, details: list | None = None
) -> dict:
    """``{"error": {code, message, details, requestId}}``"""
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details or [],
            "requestId": getattr(request.state, "request_id", "unknown"),
        }
    }


async def handle_app_exception(request: Request, exc: AppException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(request, exc.code, exc.message, exc.details),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"field": ".".join(str(part) for part in err.get("loc", [])), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content=error_body(request, "VALIDATION_ERROR", "Validation failed", details),
    )


async def handle_rate_limit(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return JSONResponse(
        status_code=429,
        content=error_body(request, "RATE_LIMITED", f"Rate limit exceeded: {exc.detail}"),
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=error_body(
            request, InternalServerException.code, "An unexpected error occurred."
        ),
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(AppException, handle_app_exception)
    application.add_exception_handler(RequestValidationError, handle_validation_error)
    application.add_exception_handler(RateLimitExceeded, handle_rate_limit)
    application.add_exception_handler(Exception, handle_unexpected)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def create_app() -> FastAPI:
    configure_logging()

    application = FastAPI(
        title="GreenPro Product Registration API",
        description="Vendor product and plant registration with URN and EOI generation.",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    application.state.limiter = limiter

    # Starlette runs the last-added middleware first, so request ids are
    # assigned before CORS handling.
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
    )
    from greenpro.middleware.request_id import RequestIdMiddleware

    application.add_middleware(RequestIdMiddleware)

    from greenpro.api.v1 import v1_router

    application.include_router(v1_router)
    register_exception_handlers(application)

    @application.get("/health", tags=["health"])
    async def health_check() -> dict:
        return {"status": "ok"}

    return application


app = create_app()
