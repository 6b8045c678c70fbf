"""Query builders for the pgvector event index."""

from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert

from internal.model import EventEmbedding

_TABLE = EventEmbedding.__table__


def build_upsert_query(row: Dict[str, Any]):
    """INSERT ... ON CONFLICT (id) DO UPDATE; ``row`` is keyed by column name."""
    stmt = pg_insert(_TABLE).values(**row)
    return stmt.on_conflict_do_update(
        index_elements=[_TABLE.c.id],
        set_={
            "text": stmt.excluded["text"],
            "embedding": stmt.excluded["embedding"],
            "metadata": stmt.excluded["metadata"],
        },
    )


def build_search_query(embedding: List[float], limit: int):
    return (
        select(EventEmbedding)
        .order_by(EventEmbedding.embedding.cosine_distance(embedding))
        .limit(limit)
    )


__all__ = [
    "build_upsert_query",
    "build_search_query",
]
