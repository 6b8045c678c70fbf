"""Private helpers for social_event PostgreSQL repository.

Mapping between model.SocialEvent and SocialEventRecord rows.
"""

from typing import Any, Dict, List, Sequence

from internal.model import (
    EngagementMetrics,
    SentimentAnalysis,
    SocialEvent,
    SocialEventRecord,
    utcnow,
)

# Columns overwritten when an existing key is re-ingested
UPSERT_COLUMNS = [
    "collection",
    "author_id",
    "author_name",
    "event_content",
    "clean_event_text",
    "event_title",
    "event_url",
    "parent_event_id",
    "likes",
    "shares",
    "comments",
    "overall_sentiment",
    "sentiment_score",
    "categories",
    "location_focus",
    "airline_mentioned",
    "timestamp_utc",
]


def event_to_row(collection: str, event: SocialEvent) -> Dict[str, Any]:
    metrics = event.engagement_metrics
    sentiment = event.sentiment_analysis
    return {
        "collection": collection,
        "event_id": event.event_id,
        "platform": event.platform,
        "author_id": event.author_id,
        "author_name": event.author_name,
        "event_content": event.event_content or "",
        "clean_event_text": event.clean_event_text or "",
        "event_title": event.event_title,
        "event_url": event.event_url,
        "parent_event_id": event.parent_event_id,
        "likes": metrics.likes,
        "shares": metrics.shares,
        "comments": metrics.comments,
        "overall_sentiment": sentiment.overall_sentiment if sentiment else None,
        "sentiment_score": sentiment.sentiment_score if sentiment else None,
        "categories": dict(sentiment.categories) if sentiment else None,
        "location_focus": event.location_focus,
        "airline_mentioned": event.airline_mentioned,
        "timestamp_utc": event.timestamp_utc,
        "created_at": event.created_at or utcnow(),
    }


def record_to_event(record: SocialEventRecord) -> SocialEvent:
    sentiment = None
    if record.overall_sentiment is not None:
        sentiment = SentimentAnalysis(
            overall_sentiment=record.overall_sentiment,
            sentiment_score=(
                record.sentiment_score if record.sentiment_score is not None else 0.5
            ),
            categories=dict(record.categories or {}),
        )

    return SocialEvent(
        event_id=record.event_id,
        platform=record.platform,
        event_content=record.event_content or "",
        clean_event_text=record.clean_event_text or "",
        author_id=record.author_id,
        author_name=record.author_name,
        event_title=record.event_title,
        event_url=record.event_url,
        parent_event_id=record.parent_event_id,
        engagement_metrics=EngagementMetrics(
            likes=record.likes,
            shares=record.shares,
            comments=record.comments,
        ),
        sentiment_analysis=sentiment,
        location_focus=record.location_focus,
        airline_mentioned=record.airline_mentioned,
        timestamp_utc=record.timestamp_utc,
        created_at=record.created_at,
    )


def dedupe_by_key(events: Sequence[SocialEvent]) -> List[SocialEvent]:
    """Keep the last event per (event_id, platform), in first-seen order.

    ON CONFLICT DO UPDATE rejects a statement that touches the same row twice.
    """
    latest: Dict[tuple, SocialEvent] = {}
    for event in events:
        latest[event.key] = event
    return list(latest.values())


def chunked(items: Sequence[Any], size: int) -> List[Sequence[Any]]:
    return [items[i:i + size] for i in range(0, len(items), size)]


__all__ = [
    "UPSERT_COLUMNS",
    "event_to_row",
    "record_to_event",
    "dedupe_by_key",
    "chunked",
]
