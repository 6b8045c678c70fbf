"""Query builders for document repository."""

from sqlalchemy import select

from internal.model import DocumentRecord
from ..option import ListOptions


def build_list_query(opt: ListOptions):
    stmt = (
        select(DocumentRecord)
        .where(DocumentRecord.collection == opt.collection)
        .order_by(DocumentRecord.created_at.desc())
    )
    if opt.limit > 0:
        stmt = stmt.limit(opt.limit)
    return stmt


__all__ = ["build_list_query"]
