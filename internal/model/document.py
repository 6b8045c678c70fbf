"""Database model for schemaless documents (contact messages, weather data)."""

from sqlalchemy import Column, DateTime, Index, String
from sqlalchemy.dialects.postgresql import JSONB

from .base import Base
from .social_event import utcnow


class DocumentRecord(Base):
    __tablename__ = "documents"
    __table_args__ = (
        Index("idx_documents_collection_created", "collection", "created_at"),
    )

    id = Column(String(36), primary_key=True)
    collection = Column(String(64), nullable=False)
    data = Column(JSONB, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


__all__ = ["DocumentRecord"]
