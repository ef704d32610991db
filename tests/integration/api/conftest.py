"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from stockroom.infrastructure.persistence.sqlalchemy.models import Base
from stockroom.presentation.api.app import API_V1_PREFIX, create_app
from stockroom.presentation.api.dependencies import get_db_session
from stockroom_config.settings import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled and cheap password hashing."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        database_dsn="sqlite+aiosqlite:///:memory:",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        password_hash_rounds=4,
    )


@pytest.fixture
async def test_db_engine():
    """Create an in-memory SQLite database shared by all connections."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_client(api_settings, test_db_engine) -> TestClient:
    """Create a test client with an in-memory database."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    return TestClient(app)


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "name": "Ana",
        "email": "ana@mail.com",
        "password": "pw123",
    }


@pytest.fixture
def auth_headers(test_client, registered_user_data, api_v1_prefix) -> dict:
    """Register a user, log in, and return bearer auth headers."""
    response = test_client.post(f"{api_v1_prefix}/users", json=registered_user_data)
    assert response.status_code == 201

    response = test_client.post(
        f"{api_v1_prefix}/auth/login",
        json={
            "email": registered_user_data["email"],
            "password": registered_user_data["password"],
        },
    )
    assert response.status_code == 200

    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
