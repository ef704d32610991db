"""Application settings loaded from environment variables.

Lookup order, first hit wins for each field:
1. OS environment variables
2. The .env file named by STOCKROOM_ENV_FILE (relative paths resolve
   against the project root)
3. config/.env.dev, for local development
4. config/.env, for production/Docker
5. Field defaults

JWT_SECRET_KEY has no default; constructing Settings without it fails.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "STOCKROOM_ENV_FILE"
_ROOT_MARKERS = ("config", ".git", "pyproject.toml")


def _project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return here.parent


def get_config_dir() -> Path:
    """Directory holding the .env files."""
    return _project_root() / "config"


def _env_file() -> Path | None:
    candidates: list[Path] = []

    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else _project_root() / path)

    config_dir = get_config_dir()
    candidates += [config_dir / ".env.dev", config_dir / ".env"]

    return next((path for path in candidates if path.is_file()), None)


class Settings(BaseSettings):
    """Stockroom configuration.

    Field names map to upper-case environment variables
    (``jwt_secret_key`` <- ``JWT_SECRET_KEY``).
    """

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required: signs and verifies every access token
    jwt_secret_key: SecretStr

    app_name: str = "Stockroom"
    debug: bool = False

    # A full async SQLAlchemy URL; when unset one is assembled from POSTGRES_*
    database_dsn: str | None = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "stockroom"

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""  # comma-separated; empty disables CORS

    jwt_access_token_expire_hours: int = Field(default=24, gt=0)
    password_hash_rounds: int = Field(default=12, ge=4, le=31)

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return str(value) if value else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.database_dsn:
            return self.database_dsn

        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [
            origin.strip()
            for origin in self.api_cors_origins.split(",")
            if origin.strip()
        ]


@lru_cache()
def get_settings() -> Settings:
    """Load settings once per process.

    Raises pydantic's ValidationError when JWT_SECRET_KEY is missing.
    """
    return Settings()  # type: ignore[call-arg]  # values come from the environment


def clear_settings_cache() -> None:
    get_settings.cache_clear()
