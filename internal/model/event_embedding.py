"""Database model for the event retrieval index (pgvector)."""

from pgvector.sqlalchemy import Vector
from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.dialects.postgresql import JSONB

from .base import Base
from .constant import EMBEDDING_DIMENSIONS
from .social_event import utcnow


class EventEmbedding(Base):
    __tablename__ = "event_embeddings"

    # "<platform>:<event_id>"
    id = Column(String(320), primary_key=True)
    text = Column(Text, nullable=False)
    embedding = Column(Vector(EMBEDDING_DIMENSIONS), nullable=False)
    # "metadata" is reserved on declarative classes
    meta = Column("metadata", JSONB, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


__all__ = ["EventEmbedding"]
