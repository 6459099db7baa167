"""FastAPI application for the Autogestion API."""

import asyncio
from contextlib import asynccontextmanager

import fastapi
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from core.config import get_settings
from core.database import (
    create_engine,
    create_session_maker,
    dispose_engine,
    init_db,
)
from core.logger import configure_logging, get_logger
from core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from core.ratelimit import limiter, rate_limit_exceeded_handler
from routes import entity_routers, health_router
from services.exceptions import ExternalServiceError, NotFoundError, ValidationError

configure_logging()
logger = get_logger(__name__)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for unhandled exceptions."""
    logger.exception(
        "unhandled.exception",
        exc_type=type(exc).__name__,
        path=request.url.path,
        method=request.method,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected error occurred. Please try again."},
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handler for request body/path/query schema errors (400)."""
    if not isinstance(exc, RequestValidationError):
        return JSONResponse(status_code=500, content={"detail": "Unexpected error"})

    logger.warning(
        "request.validation_error",
        path=request.url.path,
        method=request.method,
        error_count=len(exc.errors()),
    )
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def domain_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    """Business-rule violations raised by services (400)."""
    if not isinstance(exc, ValidationError):
        return JSONResponse(status_code=500, content={"detail": "Unexpected error"})

    logger.info("request.rejected", field=exc.field, reason=exc.message)
    return JSONResponse(
        status_code=400,
        content={"detail": exc.message, "field": exc.field},
    )


async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, NotFoundError):
        return JSONResponse(status_code=500, content={"detail": "Unexpected error"})

    return JSONResponse(
        status_code=404,
        content={"detail": exc.message, "entity": exc.entity, "id": exc.entity_id},
    )


async def external_service_handler(request: Request, exc: Exception) -> JSONResponse:
    """Subsystem failures (500). The underlying cause is logged, never returned."""
    if not isinstance(exc, ExternalServiceError):
        return JSONResponse(status_code=500, content={"detail": "Unexpected error"})

    logger.error(
        "request.subsystem_failed",
        subsystem=exc.subsystem,
        error=exc.message,
        cause_type=type(exc.cause).__name__ if exc.cause else None,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": exc.message, "subsystem": exc.subsystem},
    )


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    """Create DB engine at startup, dispose on shutdown.

    The schema is owned by Alembic (``python -m cli migrate``).
    """
    app.state.engine = create_engine()
    app.state.session_maker = create_session_maker(app.state.engine)

    app.state.init_done = False
    app.state.init_error = None

    try:
        async with asyncio.timeout(60):
            await init_db(app.state.engine)

        app.state.init_done = True
        logger.info("init.complete")
    except TimeoutError:
        logger.error(
            "init.timeout",
            hint="Startup hung, check DB connectivity",
        )
        raise RuntimeError("Application startup timed out")
    except Exception as e:
        app.state.init_error = str(e)
        logger.error("init.failed", error=str(e), exc_info=True)
        raise

    try:
        yield
    finally:
        await dispose_engine(app.state.engine)


_settings = get_settings()

app = fastapi.FastAPI(
    title="Autogestion API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if _settings.enable_docs or _settings.debug else None,
    redoc_url="/redoc" if _settings.enable_docs or _settings.debug else None,
    openapi_url=("/openapi.json" if _settings.enable_docs or _settings.debug else None),
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(ValidationError, domain_validation_handler)
app.add_exception_handler(NotFoundError, not_found_handler)
app.add_exception_handler(ExternalServiceError, external_service_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(GZipMiddleware, minimum_size=500)
app.add_middleware(SecurityHeadersMiddleware)

if _settings.allowed_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
        expose_headers=["X-Request-Duration-Ms", "X-Request-Id"],
        max_age=600,
    )

# Outermost middleware: wraps every request including middleware time.
app.add_middleware(RequestLoggingMiddleware)


app.include_router(health_router)
for router in entity_routers:
    app.include_router(router)
