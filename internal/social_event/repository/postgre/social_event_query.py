"""Query builders for social_event repository.

Convention: Pure query building. No DB execution, no domain mapping.
"""

from typing import Any, Dict, List, Sequence, Tuple

from sqlalchemy import delete as sql_delete, func, select, tuple_
from sqlalchemy.dialects.postgresql import insert as pg_insert

from internal.model import SocialEventRecord
from ..option import DeleteOptions, ListOptions
from .helpers import UPSERT_COLUMNS

UNIQUE_KEY_CONSTRAINT = "uq_social_events_event_platform"


def build_insert_if_absent_query(row: Dict[str, Any]):
    """INSERT ... ON CONFLICT DO NOTHING RETURNING id.

    No row comes back when the key already exists.
    """
    return (
        pg_insert(SocialEventRecord)
        .values(**row)
        .on_conflict_do_nothing(constraint=UNIQUE_KEY_CONSTRAINT)
        .returning(SocialEventRecord.id)
    )


def build_upsert_query(rows: List[Dict[str, Any]]):
    """Multi-row INSERT ... ON CONFLICT (event_id, platform) DO UPDATE."""
    stmt = pg_insert(SocialEventRecord).values(rows)
    return stmt.on_conflict_do_update(
        constraint=UNIQUE_KEY_CONSTRAINT,
        set_={column: stmt.excluded[column] for column in UPSERT_COLUMNS},
    )


def build_existing_keys_query(keys: Sequence[Tuple[str, str]]):
    return select(SocialEventRecord.event_id, SocialEventRecord.platform).where(
        tuple_(SocialEventRecord.event_id, SocialEventRecord.platform).in_(list(keys))
    )


def build_list_query(opt: ListOptions):
    sort_time = func.coalesce(SocialEventRecord.timestamp_utc, SocialEventRecord.created_at)
    stmt = select(SocialEventRecord)

    if opt.collections:
        stmt = stmt.where(SocialEventRecord.collection.in_(opt.collections))
    if opt.since is not None:
        stmt = stmt.where(sort_time >= opt.since)

    stmt = stmt.order_by(sort_time.desc(), SocialEventRecord.id.desc())

    if opt.limit > 0:
        stmt = stmt.limit(opt.limit)

    return stmt


def build_delete_query(opt: DeleteOptions):
    return sql_delete(SocialEventRecord).where(
        SocialEventRecord.collection == opt.collection
    )


__all__ = [
    "UNIQUE_KEY_CONSTRAINT",
    "build_insert_if_absent_query",
    "build_upsert_query",
    "build_existing_keys_query",
    "build_list_query",
    "build_delete_query",
]
