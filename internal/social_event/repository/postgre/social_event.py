"""PostgreSQL repository for social_event entity.

Convention: Coordinator file. Calls query builders, executes, maps to domain model.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from internal.model import SocialEvent
from internal.social_event.constant import UPSERT_BATCH_SIZE
from ..interface import ISocialEventRepository
from ..option import CreateOptions, DeleteOptions, ListOptions, UpsertManyOptions
from ..errors import (
    ErrFailedToCreate,
    ErrFailedToDelete,
    ErrFailedToGet,
    ErrFailedToUpsert,
    ErrInvalidData,
)
from .social_event_query import (
    build_delete_query,
    build_existing_keys_query,
    build_insert_if_absent_query,
    build_list_query,
    build_upsert_query,
)
from .helpers import chunked, dedupe_by_key, event_to_row, record_to_event


class SocialEventPostgresRepository(ISocialEventRepository):
    """PostgreSQL implementation of the social event repository."""

    def __init__(self, db: PostgresDatabase, logger: Optional[Logger] = None) -> None:
        self.db = db
        self.logger = logger

    async def create(self, opt: CreateOptions) -> bool:
        if opt.event is None or not opt.collection:
            raise ErrInvalidData("collection and event are required")

        try:
            async with self.db.get_session() as session:
                stmt = build_insert_if_absent_query(event_to_row(opt.collection, opt.event))
                result = await session.execute(stmt)
                inserted = result.scalar_one_or_none() is not None
                await session.commit()

                if self.logger:
                    self.logger.debug(
                        f"[Repository] create: key={opt.event.key}, inserted={inserted}"
                    )
                return inserted

        except SQLAlchemyError as exc:
            if self.logger:
                self.logger.error(f"[Repository] create: {exc}")
            raise ErrFailedToCreate(f"create: {exc}") from exc

    async def upsert_many(self, opt: UpsertManyOptions) -> int:
        if not opt.collection:
            raise ErrInvalidData("collection is required")

        events = dedupe_by_key(opt.events)
        if not events:
            return 0

        try:
            async with self.db.get_session() as session:
                new_count = 0
                for batch in chunked(events, UPSERT_BATCH_SIZE):
                    keys = [e.key for e in batch]
                    result = await session.execute(build_existing_keys_query(keys))
                    existing = {(row[0], row[1]) for row in result.all()}
                    new_count += sum(1 for key in keys if key not in existing)

                    rows = [event_to_row(opt.collection, e) for e in batch]
                    await session.execute(build_upsert_query(rows))

                await session.commit()

                if self.logger:
                    self.logger.debug(
                        f"[Repository] upsert_many: collection={opt.collection}, "
                        f"total={len(events)}, new={new_count}"
                    )
                return new_count

        except SQLAlchemyError as exc:
            if self.logger:
                self.logger.error(f"[Repository] upsert_many: {exc}")
            raise ErrFailedToUpsert(f"upsert_many: {exc}") from exc

    async def list(self, opt: ListOptions) -> List[SocialEvent]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_list_query(opt))
                return [record_to_event(r) for r in result.scalars().all()]

        except SQLAlchemyError as exc:
            if self.logger:
                self.logger.error(f"[Repository] list: {exc}")
            raise ErrFailedToGet(f"list: {exc}") from exc

    async def delete(self, opt: DeleteOptions) -> int:
        if not opt.collection:
            raise ErrInvalidData("collection is required")

        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_delete_query(opt))
                await session.commit()
                return result.rowcount or 0

        except SQLAlchemyError as exc:
            if self.logger:
                self.logger.error(f"[Repository] delete: {exc}")
            raise ErrFailedToDelete(f"delete: {exc}") from exc


__all__ = ["SocialEventPostgresRepository"]
