"""Factory for PostgreSQL social event repository."""

from typing import Optional

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .social_event import SocialEventPostgresRepository


def New(
    db: PostgresDatabase,
    logger: Optional[Logger] = None,
) -> SocialEventPostgresRepository:
    if db is None:
        raise ValueError("db cannot be None")

    return SocialEventPostgresRepository(db=db, logger=logger)


__all__ = ["New"]
