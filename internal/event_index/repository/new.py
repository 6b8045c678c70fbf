"""Factory functions for creating event index repositories."""

from typing import Optional

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .memory import EventEmbeddingMemoryRepository
from .postgre import EventEmbeddingPostgresRepository


def New(db: PostgresDatabase, logger: Optional[Logger] = None) -> EventEmbeddingPostgresRepository:
    if db is None:
        raise ValueError("db cannot be None")

    return EventEmbeddingPostgresRepository(db=db, logger=logger)


def NewMemory(logger: Optional[Logger] = None) -> EventEmbeddingMemoryRepository:
    return EventEmbeddingMemoryRepository(logger=logger)


__all__ = ["New", "NewMemory"]
