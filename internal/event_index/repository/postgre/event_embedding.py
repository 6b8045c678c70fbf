"""pgvector-backed event index repository."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from internal.event_index.type import IndexEntry
from internal.model import utcnow
from ..interface import IEventIndexRepository
from ..option import SearchOptions, UpsertOptions
from ..errors import ErrFailedToGet, ErrFailedToUpsert
from .event_embedding_query import build_search_query, build_upsert_query


class EventEmbeddingPostgresRepository(IEventIndexRepository):
    def __init__(self, db: PostgresDatabase, logger: Optional[Logger] = None) -> None:
        self.db = db
        self.logger = logger

    async def upsert(self, opt: UpsertOptions) -> None:
        entry = opt.entry
        try:
            async with self.db.get_session() as session:
                await session.execute(
                    build_upsert_query(
                        {
                            "id": entry.id,
                            "text": entry.text,
                            "embedding": entry.embedding,
                            "metadata": dict(entry.metadata),
                            "created_at": utcnow(),
                        }
                    )
                )
                await session.commit()

        except SQLAlchemyError as exc:
            if self.logger:
                self.logger.error(f"[Repository] upsert: {exc}")
            raise ErrFailedToUpsert(f"upsert: {exc}") from exc

    async def search(self, opt: SearchOptions) -> List[IndexEntry]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_search_query(opt.embedding, opt.limit))
                return [
                    IndexEntry(
                        id=r.id,
                        text=r.text,
                        embedding=list(r.embedding),
                        metadata=dict(r.meta or {}),
                    )
                    for r in result.scalars().all()
                ]

        except SQLAlchemyError as exc:
            if self.logger:
                self.logger.error(f"[Repository] search: {exc}")
            raise ErrFailedToGet(f"search: {exc}") from exc


__all__ = ["EventEmbeddingPostgresRepository"]
