"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.routes.health import router as health_router
from api.routes.todos import router as todos_router
from core.config import Settings, get_settings
from core.exceptions import DatabaseConnectionError
from core.logging import setup_logging
from infrastructure.database.session import Database

logger = structlog.get_logger()

CORS_ALLOW_HEADERS = ["Origin", "Content-Length", "Content-Type", "Authorization"]
CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Bring the database up before serving and release it on shutdown.

    A database that cannot be reached or migrated aborts startup.
    """
    database: Database = app.state.database
    try:
        await database.initialize()
    except DatabaseConnectionError:
        logger.critical("startup_aborted")
        await database.dispose()
        raise

    yield

    await database.dispose()


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Todo API\n\n"
            "Create, list, update, delete and complete todo items with an "
            "optional note and deadline.\n\n"
            "Errors are returned as `400` with a plain-text message."
        ),
        version="1.0.0",
        debug=settings.debug,
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "todos",
                "description": "Todo management operations",
            },
        ],
    )

    app.state.settings = settings
    app.state.database = database or Database(settings.async_database_url, echo=settings.debug)

    # Tracking middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Configure CORS (added last so it wraps everything, error responses included)
    allow_all = settings.cors_origins_list in ([], ["*"])
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    # Setup exception handlers
    setup_exception_handlers(app, settings)

    # Include routers
    app.include_router(health_router)
    app.include_router(todos_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "main:app",
        host=_settings.host,
        port=_settings.port,
        reload=not _settings.is_production,
    )
