"""FastAPI main application module."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from petshelter.config.database import create_all_tables, dispose_engine
from petshelter.config.logging_config import setup_logging
from petshelter.config.settings import settings
from petshelter.middleware.exception_handler import register_exception_handlers
from petshelter.middleware.logging_middleware import PerformanceMiddleware, RequestLoggingMiddleware
from petshelter.middleware.timing_middleware import TimingMiddleware
from petshelter.permissions import RoleTemplateResolver, default_registry
from petshelter.routers import adoption_requests, animals, auth, shelters
from petshelter.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    status_code: {"model": ErrorResponse} for status_code in (400, 401, 403, 404, 409, 422)
}


def build_permission_resolver() -> RoleTemplateResolver:
    """Resolver for the configured registry; refuses to start on an incomplete role template."""
    resolver = RoleTemplateResolver(
        default_registry(),
        strict=settings.PERMISSIONS_STRICT_ROLES,
    )
    resolver.validate_templates()
    return resolver


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DATABASE_AUTO_CREATE:
        await create_all_tables()
    logger.info(
        f"{settings.API_TITLE} {settings.API_VERSION} started",
        extra={"environment": settings.ENVIRONMENT},
    )
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
        lifespan=lifespan,
    )
    app.state.permission_resolver = build_permission_resolver()

    register_exception_handlers(app)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=settings.ALLOWED_METHODS,
        allow_headers=settings.ALLOWED_HEADERS,
        expose_headers=["Server-Timing", "X-Request-ID"],
    )

    # Performance monitoring middleware
    app.add_middleware(PerformanceMiddleware, slow_request_threshold=settings.SLOW_REQUEST_THRESHOLD)

    # Server-Timing wraps the handlers so query timings land in its store
    app.add_middleware(TimingMiddleware)

    # Request/Response logging middleware (outermost of the custom stack)
    app.add_middleware(
        RequestLoggingMiddleware,
        log_headers=settings.ENVIRONMENT == "development",
    )

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.API_VERSION,
            "environment": settings.ENVIRONMENT,
        }

    app.include_router(
        auth.router,
        prefix=f"{settings.API_PREFIX}/auth",
        tags=["Authentication"],
        responses=ERROR_RESPONSES,
    )
    app.include_router(
        animals.router,
        prefix=f"{settings.API_PREFIX}/animals",
        tags=["Animals"],
        responses=ERROR_RESPONSES,
    )
    app.include_router(
        adoption_requests.router,
        prefix=f"{settings.API_PREFIX}/adoption-requests",
        tags=["Adoption requests"],
        responses=ERROR_RESPONSES,
    )
    app.include_router(
        shelters.router,
        prefix=f"{settings.API_PREFIX}/shelters",
        tags=["Shelters"],
        responses=ERROR_RESPONSES,
    )

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint."""
        return {
            "message": "Pet Shelter API",
            "version": settings.API_VERSION,
            "docs_url": f"{settings.API_PREFIX}/docs",
        }

    return app


app = create_app()
