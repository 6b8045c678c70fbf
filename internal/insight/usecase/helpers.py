from datetime import datetime
from typing import Dict, Iterable, List, Optional, Pattern, Sequence

from internal.model import SocialEvent
from internal.insight.type import Analysis, GroupStats, PlatformStats, SentimentTrend


def event_text(event: SocialEvent) -> str:
    return event.clean_event_text or event.event_content or ""


def mean_sentiment(events: Sequence[SocialEvent]) -> float:
    if not events:
        return 0.0
    return sum(e.overall_sentiment for e in events) / len(events)


def group_stats(
    events: Sequence[SocialEvent], pattern: Pattern, recent_since: datetime
) -> Optional[GroupStats]:
    """Stats over events whose text hits ``pattern``; None when nothing matches."""
    matched = [e for e in events if pattern.search(event_text(e))]
    if not matched:
        return None
    return GroupStats(
        mention_count=len(matched),
        average_sentiment=mean_sentiment(matched),
        recent_mentions=sum(1 for e in matched if e.sort_time > recent_since),
    )


def platform_stats(events: Iterable[SocialEvent]) -> Dict[str, PlatformStats]:
    grouped: Dict[str, List[SocialEvent]] = {}
    for event in events:
        grouped.setdefault(event.platform, []).append(event)

    stats = {}
    for platform, items in grouped.items():
        total = sum(e.engagement_metrics.total for e in items)
        stats[platform] = PlatformStats(
            event_count=len(items),
            total_engagement=total,
            avg_engagement=total / len(items),
            avg_sentiment=mean_sentiment(items),
        )
    return stats


def analyze(
    events: Sequence[SocialEvent],
    recent_since: datetime,
    category_patterns: Dict[str, Pattern],
    airline_patterns: Dict[str, Pattern],
) -> Analysis:
    recent = [e for e in events if e.sort_time > recent_since]
    older = [e for e in events if e.sort_time <= recent_since]

    categories = {}
    for name, pattern in category_patterns.items():
        stats = group_stats(events, pattern, recent_since)
        if stats is not None:
            categories[name] = stats

    airlines = {}
    for slug, pattern in airline_patterns.items():
        stats = group_stats(events, pattern, recent_since)
        if stats is not None:
            airlines[slug] = stats

    return Analysis(
        total_events=len(events),
        recent_events=len(recent),
        sentiment=SentimentTrend(recent=mean_sentiment(recent), previous=mean_sentiment(older)),
        categories=categories,
        airlines=airlines,
        platforms=platform_stats(events),
    )


__all__ = [
    "analyze",
    "event_text",
    "group_stats",
    "mean_sentiment",
    "platform_stats",
]
