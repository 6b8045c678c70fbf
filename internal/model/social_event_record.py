"""Database model for collected social events."""

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Float,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB

from .base import Base
from .social_event import utcnow


class SocialEventRecord(Base):
    """One row per (event_id, platform); ``collection`` is the source bucket."""

    __tablename__ = "social_events"
    __table_args__ = (
        UniqueConstraint("event_id", "platform", name="uq_social_events_event_platform"),
        Index("idx_social_events_collection", "collection"),
        Index("idx_social_events_timestamp_utc", "timestamp_utc"),
        Index("idx_social_events_airline", "airline_mentioned"),
    )

    id = Column(BigInteger, primary_key=True, autoincrement=True)
    collection = Column(String(64), nullable=False)

    # Identity
    event_id = Column(String(255), nullable=False)
    platform = Column(String(64), nullable=False)

    # Content
    author_id = Column(String(255), nullable=True)
    author_name = Column(String(255), nullable=True)
    event_content = Column(Text, nullable=False, default="")
    clean_event_text = Column(Text, nullable=False, default="")
    event_title = Column(Text, nullable=True)
    event_url = Column(Text, nullable=True)
    parent_event_id = Column(String(255), nullable=True)

    # Engagement
    likes = Column(Integer, nullable=True)
    shares = Column(Integer, nullable=True)
    comments = Column(Integer, nullable=True)

    # Sentiment
    overall_sentiment = Column(Float, nullable=True)
    sentiment_score = Column(Float, nullable=True)
    categories = Column(JSONB, nullable=True)

    # Context
    location_focus = Column(String(128), nullable=True)
    airline_mentioned = Column(String(128), nullable=True)

    # Timestamps
    timestamp_utc = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<SocialEventRecord(platform={self.platform}, event_id={self.event_id})>"


__all__ = ["SocialEventRecord"]
