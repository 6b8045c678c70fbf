"""Interface for PostgreSQL database operations."""

from typing import AsyncContextManager, Protocol, runtime_checkable

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncSession


@runtime_checkable
class IDatabase(Protocol):
    """Protocol for database operations."""

    def get_session(self) -> AsyncContextManager[AsyncSession]:
        """Open a session that is rolled back on error and always closed."""
        ...

    async def create_all(self, metadata: MetaData) -> None:
        """Create missing tables (and required extensions) for metadata."""
        ...

    async def health_check(self) -> bool:
        """Return True when SELECT 1 succeeds."""
        ...

    async def close(self) -> None:
        """Dispose the engine."""
        ...


__all__ = ["IDatabase"]
