"""
SQL database connection using SQLAlchemy's async engine.
Includes detailed logging and comprehensive error handling.
"""

from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from core.config import Settings, get_settings
from core.logger import logger
from repositories.models import Base


def get_engine_kwargs(url: str, settings: Settings) -> Dict[str, Any]:
    """
    Engine parameters for the dialect behind ``url``.

    In-memory SQLite needs a single shared connection, file SQLite uses the
    driver's default pool, everything else gets a sized QueuePool.
    """
    parsed = make_url(url)
    kwargs: Dict[str, Any] = {"echo": settings.database_echo}

    if parsed.get_backend_name() == "sqlite":
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
        return kwargs

    kwargs.update(
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
        pool_recycle=settings.database_pool_recycle,
    )
    return kwargs


class DatabaseManager:
    """Async engine and session factory with lifecycle helpers."""

    def __init__(self, settings: Optional[Settings] = None):
        """
        Create the engine. No connection is opened until first use.

        Args:
            settings: Application settings (defaults to the cached settings)
        """
        self.settings = settings or get_settings()
        self.url = self.settings.database_connection_url
        self.engine: AsyncEngine = create_async_engine(
            self.url, **get_engine_kwargs(self.url, self.settings)
        )
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )
        logger.debug(
            f"Database manager initialized: {self.settings.masked_database_url}"
        )

    async def connect(self) -> None:
        """
        Verify connectivity and create tables when configured.

        Raises:
            Exception: If the database cannot be reached
        """
        try:
            logger.info(f"Connecting to database: {self.settings.masked_database_url}")
            async with self.engine.connect() as connection:
                await connection.execute(text("SELECT 1"))

            if self.settings.database_create_tables:
                await self.create_tables()

            logger.info("Connected to database")

        except Exception as e:
            logger.error(f"Failed to connect to database: {e}")
            logger.exception("Database connection error details:")
            raise

    async def disconnect(self) -> None:
        """Dispose the engine and its pooled connections."""
        try:
            logger.info("Disconnecting from database...")
            await self.engine.dispose()
            logger.info("Disconnected from database")
        except Exception as e:
            logger.error(f"Error disconnecting from database: {e}")
            logger.exception("Database disconnection error details:")

    async def health_check(self) -> bool:
        """
        Check if the database answers a trivial query.

        Returns:
            True if connection is healthy, False otherwise
        """
        try:
            async with self.engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
            logger.debug("Database health check passed")
            return True
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False

    async def create_tables(self) -> None:
        """Create the tasks and users tables if they do not exist."""
        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def drop_tables(self) -> None:
        """Drop the tasks and users tables."""
        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.drop_all)
        logger.info("Database tables dropped")

    async def reset_tables(self) -> None:
        """Drop and recreate all tables, restarting id sequences."""
        await self.drop_tables()
        await self.create_tables()
