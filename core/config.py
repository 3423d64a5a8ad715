"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="Tasks & Users API", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=True, alias="DEBUG")

    # API Service
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    api_reload: bool = Field(default=False, alias="API_RELOAD")
    api_workers: int = Field(default=1, alias="API_WORKERS")

    # Storage backend: "memory" keeps records in process, "database" uses SQL
    storage_backend: Literal["memory", "database"] = Field(
        default="memory", alias="STORAGE_BACKEND"
    )

    # Database Settings (used when storage_backend == "database")
    database_url: str = Field(
        default="postgresql+asyncpg://localhost:5432/tasks", alias="DATABASE_URL"
    )
    database_user: Optional[str] = Field(default=None, alias="DATABASE_USER")
    database_password: Optional[str] = Field(default=None, alias="DATABASE_PASSWORD")
    database_pool_size: int = Field(default=10, alias="DATABASE_POOL_SIZE")
    database_max_overflow: int = Field(default=20, alias="DATABASE_MAX_OVERFLOW")
    database_pool_recycle: int = Field(default=3600, alias="DATABASE_POOL_RECYCLE")
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")
    database_create_tables: bool = Field(default=True, alias="DATABASE_CREATE_TABLES")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: str = Field(default="logs", alias="LOG_DIR")

    @property
    def uses_database(self) -> bool:
        """True when the durable (SQL) store is selected."""
        return self.storage_backend == "database"

    @property
    def database_connection_url(self) -> str:
        """
        Construct the SQLAlchemy URL used by the async engine.

        Plain ``postgresql://`` URLs get the asyncpg driver. DATABASE_USER and
        DATABASE_PASSWORD, when provided, override credentials embedded in
        DATABASE_URL.
        """
        url = normalize_database_url(self.database_url)
        if not self.database_user and not self.database_password:
            return url

        parsed = make_url(url)
        if self.database_user:
            parsed = parsed.set(username=self.database_user)
        if self.database_password:
            parsed = parsed.set(password=self.database_password)
        return parsed.render_as_string(hide_password=False)

    @property
    def masked_database_url(self) -> str:
        """Database URL safe for logging (password replaced)."""
        return make_url(self.database_connection_url).render_as_string(
            hide_password=True
        )


def normalize_database_url(url: str) -> str:
    """
    Pick the async driver for URLs that do not name one.

    Args:
        url: Database connection string

    Returns:
        Connection string with an async driver
    """
    scheme, sep, rest = url.partition("://")
    if not sep or "+" in scheme:
        return url
    if scheme in ("postgresql", "postgres"):
        return f"postgresql+asyncpg://{rest}"
    if scheme == "sqlite":
        return f"sqlite+aiosqlite://{rest}"
    return url


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
