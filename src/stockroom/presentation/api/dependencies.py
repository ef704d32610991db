"""Request-scoped wiring for the HTTP layer.

Each request gets one ``AsyncSession``; repositories and services are built
on top of it by the functions below and handed to route handlers through
the ``Annotated`` aliases (``DBSession``, ``UserDirectory``, ``AuthService``,
``ProductCatalog``, ``CurrentSubject``). Engines and session factories are
process-wide and cached per database URL.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from stockroom.application.services import (
    AuthenticationService,
    ProductCatalogService,
    UserDirectoryService,
)
from stockroom.infrastructure.persistence.sqlalchemy import (
    Base,
    ProductRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from stockroom_auth import InvalidTokenError, JWTService, PasswordHashingService
from stockroom_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_api_settings() -> Settings:
    """Settings for request handlers; ``create_app(settings=...)`` overrides it."""
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -- database ---------------------------------------------------------------


def _ensure_sqlite_parent_dir(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


@lru_cache()
def get_engine(database_url: str | None = None) -> AsyncEngine:
    """Shared engine (and connection pool) for ``database_url``.

    Without an argument the URL comes from the process settings.
    """
    database_url = database_url or get_settings().database_url
    _ensure_sqlite_parent_dir(database_url)
    return create_async_engine(database_url, pool_pre_ping=True)


@lru_cache()
def get_session_maker(database_url: str | None = None) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(database_url),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(settings: SettingsDep) -> AsyncGenerator[AsyncSession, None]:
    """One session per request.

    Handlers commit after a successful write; whatever is still pending when
    the session closes is rolled back.
    """
    async with get_session_maker(settings.database_url)() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """Create missing tables. Existing tables and rows are left alone."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready (%s)", engine.url.render_as_string())


# -- credentials and tokens -------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.password_hash_rounds)


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]


def get_user_directory_service(
    session: DBSession,
    password_service: PasswordServiceDep,
) -> UserDirectoryService:
    return UserDirectoryService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
    )


UserDirectory = Annotated[UserDirectoryService, Depends(get_user_directory_service)]


def get_authentication_service(
    user_directory: UserDirectory,
    password_service: PasswordServiceDep,
    jwt_service: JWTServiceDep,
) -> AuthenticationService:
    return AuthenticationService(
        user_directory=user_directory,
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_current_subject(
    jwt_service: JWTServiceDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """
    Access gate: the email a valid bearer token was issued for.

    Only the signature and expiry are checked; the user record is not
    consulted.

    Raises
    ------
    InvalidTokenError
        When the header is missing or the token does not verify. The
        exception handlers turn this into a 401.
    """
    if credentials is None:
        raise InvalidTokenError("Authentication required")

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Rejected bearer token: %s", e.message)
        raise InvalidTokenError() from e

    return payload.subject


CurrentSubject = Annotated[str, Depends(get_current_subject)]


# -- catalog ----------------------------------------------------------------


def get_product_catalog_service(session: DBSession) -> ProductCatalogService:
    return ProductCatalogService(
        product_repository=ProductRepositorySQLAlchemy(session),
    )


ProductCatalog = Annotated[ProductCatalogService, Depends(get_product_catalog_service)]
