from contextlib import asynccontextmanager
from typing import AsyncGenerator, Sequence

from loguru import logger
from sqlalchemy import MetaData, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from .interface import IDatabase
from .type import PostgresConfig
from .constant import *


class PostgresDatabase(IDatabase):
    """Async PostgreSQL manager (SQLAlchemy + asyncpg).

    The engine is created eagerly but connects lazily, so constructing this
    object never touches the network; call ``health_check`` to find out
    whether the server is reachable.
    """

    def __init__(self, config: PostgresConfig):
        self.config = config
        self.engine = None
        self.session_factory = None
        self._initialize_engine()

    def _initialize_engine(self) -> None:
        try:
            self.engine = create_async_engine(
                self.config.async_url,
                echo=self.config.echo,
                pool_pre_ping=self.config.pool_pre_ping,
                pool_recycle=self.config.pool_recycle,
                pool_size=self.config.pool_size,
                max_overflow=self.config.max_overflow,
                connect_args={"timeout": self.config.connect_timeout},
            )
            self.session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=True,
            )
            logger.info("PostgreSQL engine initialized")
        except Exception as e:
            logger.error(f"Failed to initialize PostgreSQL engine: {e}")
            raise

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; roll back and re-raise on error.

        Raises:
            RuntimeError: If the engine was never initialized
        """
        if not self.session_factory:
            raise RuntimeError(ERROR_DATABASE_NOT_INITIALIZED)

        async with self.session_factory() as session:
            try:
                if self.config.schema != DEFAULT_SCHEMA:
                    await session.execute(
                        text(f"SET search_path TO {self.config.schema}, {DEFAULT_SCHEMA}")
                    )
                yield session
            except Exception as e:
                logger.error(f"Database session error: {e}")
                await session.rollback()
                raise

    async def create_all(
        self, metadata: MetaData, extensions: Sequence[str] = ()
    ) -> None:
        """Create extensions, the configured schema and any missing tables."""
        async with self.engine.begin() as conn:
            for extension in extensions:
                await conn.execute(text(f"CREATE EXTENSION IF NOT EXISTS {extension}"))
            if self.config.schema != DEFAULT_SCHEMA:
                await conn.execute(text(f"CREATE SCHEMA IF NOT EXISTS {self.config.schema}"))
                await conn.execute(
                    text(f"SET search_path TO {self.config.schema}, {DEFAULT_SCHEMA}")
                )
            await conn.run_sync(metadata.create_all)
        logger.info(f"PostgreSQL schema ensured: {len(metadata.tables)} tables")

    async def health_check(self) -> bool:
        try:
            async with self.get_session() as session:
                result = await session.execute(text("SELECT 1"))
                return result.scalar() == 1
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False

    async def close(self) -> None:
        if self.engine:
            await self.engine.dispose()
            logger.info("PostgreSQL engine closed")


__all__ = ["PostgresDatabase"]
