from .base import Base
from .social_event import (
    SocialEvent,
    EngagementMetrics,
    SentimentAnalysis,
    ErrSocialEventValidation,
    parse_datetime,
    utcnow,
)
from .social_event_record import SocialEventRecord
from .event_embedding import EventEmbedding
from .document import DocumentRecord

__all__ = [
    "Base",
    # Domain types
    "SocialEvent",
    "EngagementMetrics",
    "SentimentAnalysis",
    "ErrSocialEventValidation",
    "parse_datetime",
    "utcnow",
    # ORM
    "SocialEventRecord",
    "EventEmbedding",
    "DocumentRecord",
]
