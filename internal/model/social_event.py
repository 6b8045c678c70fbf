"""SocialEvent: one normalized post or article, shared by every domain.

Provides:
- SocialEvent dataclasses (SocialEvent, EngagementMetrics, SentimentAnalysis)
- SocialEvent.parse() for JSON payloads (API input, cache reads)
- SocialEvent.to_dict() for the wire format
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class ErrSocialEventValidation(Exception):
    pass


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_datetime(value: Any) -> Optional[datetime]:
    """Accept datetime, ISO-8601 string or epoch (seconds or milliseconds)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        seconds = value / 1000 if value > 1e11 else value
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            raise ErrSocialEventValidation(f"invalid timestamp: {value!r}")
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    raise ErrSocialEventValidation(f"invalid timestamp type: {type(value).__name__}")


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


@dataclass
class EngagementMetrics:
    likes: Optional[int] = None
    shares: Optional[int] = None
    comments: Optional[int] = None

    @property
    def total(self) -> int:
        return (self.likes or 0) + (self.shares or 0) + (self.comments or 0)

    def to_dict(self) -> Dict[str, Optional[int]]:
        return {"likes": self.likes, "shares": self.shares, "comments": self.comments}


@dataclass
class SentimentAnalysis:
    overall_sentiment: float = 0.0  # -1, 0 or 1
    sentiment_score: float = 0.5  # [0, 1]
    categories: Dict[str, Optional[float]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall_sentiment": self.overall_sentiment,
            "sentiment_score": self.sentiment_score,
            "categories": dict(self.categories),
        }


@dataclass
class SocialEvent:
    event_id: str
    platform: str
    event_content: str = ""
    clean_event_text: str = ""
    author_id: Optional[str] = None
    author_name: Optional[str] = None
    event_title: Optional[str] = None
    event_url: Optional[str] = None
    parent_event_id: Optional[str] = None
    engagement_metrics: EngagementMetrics = field(default_factory=EngagementMetrics)
    sentiment_analysis: Optional[SentimentAnalysis] = None
    location_focus: Optional[str] = None
    airline_mentioned: Optional[str] = None
    timestamp_utc: Optional[datetime] = None
    created_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        if not self.event_id:
            raise ErrSocialEventValidation("event_id is required")
        if not self.platform:
            raise ErrSocialEventValidation("platform is required")

    @property
    def key(self) -> tuple:
        return (self.event_id, self.platform)

    @property
    def sort_time(self) -> datetime:
        """Source time when known, ingestion time otherwise."""
        return self.timestamp_utc or self.created_at

    @property
    def overall_sentiment(self) -> float:
        if self.sentiment_analysis is None:
            return 0.0
        return self.sentiment_analysis.overall_sentiment

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_id": self.event_id,
            "platform": self.platform,
            "author_id": self.author_id,
            "author_name": self.author_name,
            "event_content": self.event_content,
            "clean_event_text": self.clean_event_text,
            "event_title": self.event_title,
            "event_url": self.event_url,
            "parent_event_id": self.parent_event_id,
            "engagement_metrics": self.engagement_metrics.to_dict(),
            "sentiment_analysis": (
                self.sentiment_analysis.to_dict() if self.sentiment_analysis else None
            ),
            "location_focus": self.location_focus,
            "airline_mentioned": self.airline_mentioned,
            "timestamp_utc": self.timestamp_utc.isoformat() if self.timestamp_utc else None,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def parse(cls, raw: Dict[str, Any]) -> "SocialEvent":
        if not isinstance(raw, dict):
            raise ErrSocialEventValidation("event must be an object")

        metrics_raw = raw.get("engagement_metrics") or {}
        sentiment_raw = raw.get("sentiment_analysis")

        sentiment = None
        if isinstance(sentiment_raw, dict):
            sentiment = SentimentAnalysis(
                overall_sentiment=float(sentiment_raw.get("overall_sentiment", 0.0)),
                sentiment_score=float(sentiment_raw.get("sentiment_score", 0.5)),
                categories=dict(sentiment_raw.get("categories") or {}),
            )

        return cls(
            event_id=str(raw.get("event_id") or ""),
            platform=str(raw.get("platform") or ""),
            event_content=raw.get("event_content") or "",
            clean_event_text=raw.get("clean_event_text") or "",
            author_id=raw.get("author_id"),
            author_name=raw.get("author_name"),
            event_title=raw.get("event_title"),
            event_url=raw.get("event_url"),
            parent_event_id=raw.get("parent_event_id"),
            engagement_metrics=EngagementMetrics(
                likes=_optional_int(metrics_raw.get("likes")),
                shares=_optional_int(metrics_raw.get("shares")),
                comments=_optional_int(metrics_raw.get("comments")),
            ),
            sentiment_analysis=sentiment,
            location_focus=raw.get("location_focus"),
            airline_mentioned=raw.get("airline_mentioned"),
            timestamp_utc=parse_datetime(raw.get("timestamp_utc")),
            created_at=parse_datetime(raw.get("created_at")) or utcnow(),
        )


__all__ = [
    "ErrSocialEventValidation",
    "EngagementMetrics",
    "SentimentAnalysis",
    "SocialEvent",
    "parse_datetime",
    "utcnow",
]
