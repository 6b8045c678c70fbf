"""PostgreSQL (pgvector) implementation of event_index repository."""

from .event_embedding import EventEmbeddingPostgresRepository

__all__ = ["EventEmbeddingPostgresRepository"]
