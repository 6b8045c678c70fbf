"""Factory functions for creating document repositories."""

from typing import Optional

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .memory import DocumentMemoryRepository
from .postgre import DocumentPostgresRepository


def New(db: PostgresDatabase, logger: Optional[Logger] = None) -> DocumentPostgresRepository:
    if db is None:
        raise ValueError("db cannot be None")

    return DocumentPostgresRepository(db=db, logger=logger)


def NewMemory(logger: Optional[Logger] = None) -> DocumentMemoryRepository:
    return DocumentMemoryRepository(logger=logger)


__all__ = ["New", "NewMemory"]
