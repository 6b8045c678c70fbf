"""PostgreSQL repository for document entity."""

from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from internal.document.type import Document
from internal.model import DocumentRecord, utcnow
from ..interface import IDocumentRepository
from ..option import CreateOptions, ListOptions
from ..errors import ErrFailedToCreate, ErrFailedToGet
from .document_query import build_list_query


def _to_document(record: DocumentRecord) -> Document:
    return Document(
        id=record.id,
        collection=record.collection,
        data=dict(record.data or {}),
        created_at=record.created_at,
    )


class DocumentPostgresRepository(IDocumentRepository):
    def __init__(self, db: PostgresDatabase, logger: Optional[Logger] = None) -> None:
        self.db = db
        self.logger = logger

    async def create(self, opt: CreateOptions) -> Document:
        try:
            async with self.db.get_session() as session:
                record = DocumentRecord(
                    id=str(uuid.uuid4()),
                    collection=opt.collection,
                    data=dict(opt.data),
                    created_at=utcnow(),
                )
                session.add(record)
                await session.commit()

                if self.logger:
                    self.logger.debug(
                        f"[Repository] Created document: collection={opt.collection}, id={record.id}"
                    )
                return _to_document(record)

        except SQLAlchemyError as exc:
            if self.logger:
                self.logger.error(f"[Repository] create: {exc}")
            raise ErrFailedToCreate(f"create: {exc}") from exc

    async def list(self, opt: ListOptions) -> List[Document]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_list_query(opt))
                return [_to_document(r) for r in result.scalars().all()]

        except SQLAlchemyError as exc:
            if self.logger:
                self.logger.error(f"[Repository] list: {exc}")
            raise ErrFailedToGet(f"list: {exc}") from exc


__all__ = ["DocumentPostgresRepository"]
