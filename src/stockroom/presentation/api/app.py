"""FastAPI application factory.

``create_app()`` builds a fully wired application; there is no module-level
instance, so importing this module never reads configuration. uvicorn runs
it with ``--factory``::

    uvicorn stockroom.presentation.api.app:create_app --factory

Versioned endpoints live under ``/api/v1``; ``/health`` stays unversioned.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stockroom import __version__
from stockroom.presentation.api.dependencies import (
    create_tables,
    get_api_settings,
    get_engine,
)
from stockroom.presentation.api.exception_handlers import setup_exception_handlers
from stockroom.presentation.api.routers import (
    auth_router,
    products_router,
    users_router,
)
from stockroom.presentation.api.schemas.common import HealthResponse
from stockroom_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
QUIET_LOGGERS = ("httpx", "sqlalchemy.engine", "aiosqlite")

# (router, mount prefix, OpenAPI tag)
V1_ROUTES: tuple[tuple[APIRouter, str, str], ...] = (
    (auth_router, "/auth", "Authentication"),
    (users_router, "/users", "Users"),
    (products_router, "/products", "Products"),
)

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": (
            "Exchange email and password for an HS256 access token, valid for "
            "one day. Send it as `Authorization: Bearer <token>`."
        ),
    },
    {"name": "Users", "description": "Registration and the caller's profile."},
    {
        "name": "Products",
        "description": (
            "Product catalog; every route needs a bearer token. Names are "
            "unique and `GET /products?name=` filters by substring."
        ),
    },
    {"name": "Health", "description": "Liveness probe."},
]


@lru_cache(maxsize=1)
def _configure_logging(log_level_name: str) -> None:
    """Send log records to stdout at ``log_level_name``.

    Cached so repeated ``create_app()`` calls (tests) configure once.
    """
    level = logging.getLevelName(log_level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for package in ("stockroom", "stockroom_auth"):
        logging.getLogger(package).setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings
    engine = get_engine(settings.database_url)

    logger.info("Starting %s API v%s", settings.app_name, API_VERSION)
    try:
        await create_tables(engine)
    except (ConnectionRefusedError, OSError):
        logger.critical("Database unreachable at startup")
        raise SystemExit(1) from None

    yield

    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Mount every versioned router from ``V1_ROUTES``."""
    v1_router = APIRouter()
    for router, prefix, tag in V1_ROUTES:
        v1_router.include_router(router, prefix=prefix, tags=[tag])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Parameters
    ----------
    settings
        Configuration to use instead of the environment. Request handlers
        see the same object through ``get_api_settings``.
    """
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User accounts and a token-protected product catalog.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.dependency_overrides[get_api_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        return HealthResponse(status="healthy", version=API_VERSION)

    return app
