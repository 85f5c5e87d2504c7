"""Database engine, session factory and schema bootstrap."""

import structlog
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.exceptions import DatabaseConnectionError
from infrastructure.database.models import Base

logger = structlog.get_logger()


class Database:
    """Owns the async engine and hands out sessions.

    Creating an instance does not connect; ``initialize`` does, and is meant
    to run once at startup.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        self.engine = create_async_engine(
            url,
            echo=echo,
            pool_pre_ping=True,
        )
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    async def initialize(self) -> None:
        """Connect and make sure the schema exists.

        Safe to run on every boot: existing tables and rows are left alone.

        Raises:
            DatabaseConnectionError: the store is unreachable or the schema
                could not be created.
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logger.error("database_unreachable", dialect=self.dialect, error=str(e))
            raise DatabaseConnectionError(f"cannot open database: {e}") from e

        if self.dialect == "postgresql":
            await self._enable_extensions()

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error("schema_bootstrap_failed", error=str(e))
            raise DatabaseConnectionError(f"schema bootstrap failed: {e}") from e

        logger.info("database_ready", dialect=self.dialect)

    async def _enable_extensions(self) -> None:
        """Enable pgcrypto for gen_random_uuid().

        Ids are generated by the application, so a missing extension is
        only worth a warning.
        """
        try:
            async with self.engine.begin() as conn:
                await conn.execute(text('CREATE EXTENSION IF NOT EXISTS "pgcrypto"'))
        except SQLAlchemyError as e:
            logger.warning("database_extension_unavailable", extension="pgcrypto", error=str(e))

    async def ping(self) -> None:
        """Run a trivial query; raises on failure."""
        async with self.session_factory() as session:
            await session.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
