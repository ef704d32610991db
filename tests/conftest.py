"""Root pytest configuration for test discovery and auto-skip behavior.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocked repositories)
    ├── integration/
    │   ├── api/           # FastAPI TestClient against in-memory SQLite
    │   └── persistence/   # Repositories against Testcontainers PostgreSQL
    └── shared/            # Shared fixtures and utilities

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-integration    Run integration tests
    --run-all            Run all tests
"""

import os

import pytest

# Settings require a signing secret; provide one before anything loads them
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("DATABASE_DSN", "sqlite+aiosqlite:///:memory:")

from stockroom_config import clear_settings_cache  # noqa: E402


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that need a PostgreSQL container (auto-skipped)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip container tests unless explicitly enabled."""
    run_all = config.getoption("--run-all") or os.environ.get(
        "RUN_ALL_TESTS",
        "",
    ).lower() in ("1", "true", "yes")

    if run_all:
        return

    run_integration = config.getoption("--run-integration") or os.environ.get(
        "RUN_INTEGRATION",
        "",
    ).lower() in ("1", "true", "yes")

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )

    for item in items:
        item_markers = {mark.name for mark in item.iter_markers()}

        if not run_integration and "integration" in item_markers:
            item.add_marker(skip_integration)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Make every test session start from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
