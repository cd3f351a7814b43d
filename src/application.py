import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.exceptions import HTTPException

from src.api.health import router as health_router
from src.api.home import root_router
from src.api.router import api_router
from src.config import Settings, load_settings
from src.middleware.access_log import AccessLogMiddleware
from src.middleware.error_handler import (
    http_exception_handler,
    unhandled_exception_handler,
)
from src.middleware.request_id import RequestIdMiddleware
from src.runtime import ProcessClock

logger = logging.getLogger(__name__)

ENDPOINTS = ("/", "/health", "/ready", "/api/info")

_OPENAPI_TAGS = [
    {"name": "Health", "description": "Liveness and readiness probes"},
    {"name": "Info", "description": "Instance identity"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    settings: Settings = app.state.settings
    logger.info(
        "Starting %s v%s on %s:%d",
        settings.app_name,
        settings.app_version,
        settings.host,
        settings.port,
    )
    logger.info("Endpoints: %s", ", ".join(ENDPOINTS))
    yield
    logger.info("Shutting down %s", settings.app_name)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; identity and start clock are fixed here for the process lifetime."""
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Kubernetes demo service: landing page, probes and instance info",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=_OPENAPI_TAGS,
    )
    app.state.settings = settings
    app.state.identity = settings.identity()
    app.state.clock = ProcessClock.start()

    # -----------------------------------------------------------------------
    # Exception handlers
    # -----------------------------------------------------------------------

    app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # -----------------------------------------------------------------------
    # Middleware (Starlette LIFO: last add_middleware call runs outermost)
    # -----------------------------------------------------------------------

    # AccessLogMiddleware reads REQUEST_ID_CTX written by RequestIdMiddleware, so it
    # must run inside it (closer to the application).
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(api_router)
    return app

