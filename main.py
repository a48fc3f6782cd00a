"""
SolidShop FastAPI Application
Main entry point: logging, lifespan, middleware, error handlers and the composition container
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from sqlalchemy.engine import Engine

from api.routes import users, orders, notifications, health
from domain.models import init_database
from app.config import Settings, settings
from app.container import Container, build_container
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_exception_handler,
    general_exception_handler,
)
from app.exceptions import ServiceError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("solidshop.main")


async def _init_database_with_retry(engine: Engine, app_settings: Settings) -> None:
    last_exc: Optional[Exception] = None

    for attempt in range(1, app_settings.db_init_attempts + 1):
        try:
            # Run blocking init in a thread to avoid blocking the event loop
            await anyio.to_thread.run_sync(init_database, engine)
            _logger.info("Database initialization succeeded")
            return
        except Exception as exc:
            last_exc = exc
            _logger.warning(
                "Database init attempt %d/%d failed: %s",
                attempt,
                app_settings.db_init_attempts,
                exc,
            )
            if attempt < app_settings.db_init_attempts:
                await anyio.sleep(app_settings.db_init_delay_sec)

    _logger.error(
        "Database initialization failed after %d attempts", app_settings.db_init_attempts
    )
    raise last_exc


def create_app(app_settings: Settings = settings, container: Optional[Container] = None) -> FastAPI:
    """Build the FastAPI application around a container of bindings."""
    container = container or build_container(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup creates the schema when SQL storage is bound."""
        _logger.info(
            f"Starting {app_settings.app_name} in {app_settings.environment.value} mode"
        )
        if container.engine is not None:
            await _init_database_with_retry(container.engine, app_settings)
        try:
            yield
        finally:
            _logger.info(f"Shutting down {app_settings.app_name}")

    app = FastAPI(
        title=app_settings.api_title,
        version=app_settings.app_version,
        description=app_settings.api_description,
        lifespan=lifespan,
        debug=app_settings.debug,
        openapi_url=(
            f"{app_settings.api_prefix}/openapi.json"
            if not app_settings.is_production()
            else None
        ),
        docs_url=f"{app_settings.api_prefix}/docs" if not app_settings.is_production() else None,
        redoc_url=f"{app_settings.api_prefix}/redoc" if not app_settings.is_production() else None,
    )
    app.state.container = container

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=app_settings.cors_allow_credentials,
        allow_methods=app_settings.cors_allow_methods,
        allow_headers=app_settings.cors_allow_headers,
    )

    # Add request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(ServiceError, service_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    app.include_router(users.router, prefix=app_settings.api_prefix)
    app.include_router(orders.router, prefix=app_settings.api_prefix)
    app.include_router(notifications.router, prefix=app_settings.api_prefix)
    app.include_router(health.router, prefix=app_settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
