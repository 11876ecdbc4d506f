"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- /Auth, /User, /Project, /Label, /Link, /Profile, /Health
"""

from contextlib import asynccontextmanager
from logging import getLogger
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from dishka.integrations.fastapi import setup_dishka

from flowing_links.config.logging_config import setup_logging
from flowing_links.config.settings import AccountSettings, Config, get_config
from flowing_links.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DomainError,
    EntityNotFoundError,
)
from flowing_links.domain.ports import PasswordHasher
from flowing_links.infrastructure.persistence import Database, ensure_admin_user
from flowing_links.infrastructure.security import JwtTokenService
from flowing_links.presentation.api import (
    auth_router,
    health_router,
    labels_router,
    links_router,
    profile_router,
    projects_router,
    users_router,
)
from flowing_links.presentation.middleware import (
    CorrelationIdMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from flowing_links.setup.ioc import create_container

logger = getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: check the JWT signing key, create missing tables, seed the admin account
    - Shutdown: close DI container (disposes the database engine)
    """
    container = app.state.dishka_container

    try:
        (await container.get(JwtTokenService)).validate()
    except ConfigurationError as e:
        logger.critical("Refusing to start: %s", e)
        await container.close()
        raise

    database = await container.get(Database)
    await database.create_schema()
    await ensure_admin_user(
        database,
        await container.get(AccountSettings),
        await container.get(PasswordHasher),
    )
    logger.info("FastAPI application started. DI container initialized.")

    yield

    await container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def _validation_details(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions to HTTP responses with a {"message": ...} body."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        details = _validation_details(exc)
        logger.warning("Validation error on %s: %s", request.url.path, details)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Validation error", "details": details},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message}
        )

    # AccessDeniedError is a DomainError and lands here too (400)
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.warning("Business rule violation on %s: %s", request.url.path, exc.message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"message": exc.message}
        )

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        logger.warning("Unauthorized request to %s: %s", request.url.path, exc.message)
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"message": exc.message}
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        logger.critical("Configuration error: %s", exc)
        return PlainTextResponse(UNEXPECTED_ERROR, status_code=500)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return PlainTextResponse(UNEXPECTED_ERROR, status_code=500)


def create_fastapi_app(config: Optional[Config] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        config: explicit configuration; read from the environment when omitted

    Returns:
        FastAPI application instance
    """
    config = config or get_config()
    setup_logging(config.LOG_LEVEL, config.LOG_PATH, config.LOG_FORMAT)

    app = FastAPI(
        title="FlowingLinks API",
        description="Link bookmarking backend: links, labels, projects and users",
        version="1.0.0",
        lifespan=lifespan,
        debug=config.DEBUG,
    )
    app.state.config = config
    app.state.token_service = JwtTokenService(config.jwt)

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(create_container(config), app)

    # Last added runs first: CORS → correlation id → request logging → security headers
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.CORS_ORIGINS),
        allow_credentials="*" not in config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FlowingLinks API is running."}

    # Register routers
    app.include_router(auth_router)  # POST /Auth
    app.include_router(users_router)  # /User
    app.include_router(projects_router)  # /Project
    app.include_router(labels_router)  # /Label
    app.include_router(links_router)  # /Link
    app.include_router(profile_router)  # /Profile
    app.include_router(health_router)  # /Health

    return app


# Create the app instance
app = create_fastapi_app()
