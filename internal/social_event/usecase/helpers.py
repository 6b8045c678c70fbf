import re
from collections import Counter
from typing import Dict, Iterable, List, Sequence

from internal.model import SocialEvent
from internal.model.constant import PLATFORM_TAGS
from internal.social_event.constant import *
from internal.social_event.type import (
    ChartData,
    DailyEngagement,
    DataStats,
    NameValue,
    SentimentSlice,
)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_TAG_TO_SOURCE = {tag.lower(): source for source, tag in PLATFORM_TAGS.items()}


def collection_name(platform: str) -> str:
    """Storage bucket for a source name or platform tag.

    Known tags map back to their source ("Zee News" -> "zee_news"); anything
    else is lowercased with non-alphanumeric runs replaced by "_".
    """
    value = (platform or "").strip().lower()
    if value in _TAG_TO_SOURCE:
        return _TAG_TO_SOURCE[value]
    return _NON_ALNUM.sub("_", value).strip("_")


def _distribution(values: Iterable[str]) -> List[NameValue]:
    # Counter keeps first-seen order
    return [NameValue(name=name, value=count) for name, count in Counter(values).items()]


def platform_distribution(events: Sequence[SocialEvent]) -> List[NameValue]:
    return _distribution(e.platform or UNKNOWN_PLATFORM for e in events)


def airline_distribution(events: Sequence[SocialEvent]) -> List[NameValue]:
    return _distribution(e.airline_mentioned for e in events if e.airline_mentioned)


def compute_stats(events: Sequence[SocialEvent]) -> DataStats:
    likes = sum(e.engagement_metrics.likes or 0 for e in events)
    shares = sum(e.engagement_metrics.shares or 0 for e in events)
    comments = sum(e.engagement_metrics.comments or 0 for e in events)
    sentiments = [e.overall_sentiment for e in events]

    return DataStats(
        total_events=len(events),
        total_likes=likes,
        total_shares=shares,
        total_comments=comments,
        total_views=likes + shares + comments,
        avg_sentiment=sum(sentiments) / len(sentiments) if sentiments else 0.0,
        positive_count=sum(1 for s in sentiments if s > POSITIVE_THRESHOLD),
        negative_count=sum(1 for s in sentiments if s < NEGATIVE_THRESHOLD),
        platform_distribution=platform_distribution(events),
        airline_distribution=airline_distribution(events),
    )


def engagement_trends(events: Sequence[SocialEvent]) -> List[DailyEngagement]:
    days: Dict[str, DailyEngagement] = {}
    for event in events:
        date = event.sort_time.date().isoformat()
        day = days.setdefault(date, DailyEngagement(date=date))
        day.likes += event.engagement_metrics.likes or 0
        day.shares += event.engagement_metrics.shares or 0
        day.comments += event.engagement_metrics.comments or 0
    return [days[d] for d in sorted(days)]


def sentiment_slices(events: Sequence[SocialEvent]) -> List[SentimentSlice]:
    counts = {"Positive": 0, "Neutral": 0, "Negative": 0}
    for event in events:
        sentiment = event.overall_sentiment
        if sentiment > POSITIVE_THRESHOLD:
            counts["Positive"] += 1
        elif sentiment < NEGATIVE_THRESHOLD:
            counts["Negative"] += 1
        else:
            counts["Neutral"] += 1
    return [
        SentimentSlice(name=name, value=value, color=SENTIMENT_CHART_COLORS[name])
        for name, value in counts.items()
    ]


def compute_chart_data(events: Sequence[SocialEvent]) -> ChartData:
    return ChartData(
        engagement_trends=engagement_trends(events),
        sentiment_analysis=sentiment_slices(events),
        platform_performance=platform_distribution(events),
    )


__all__ = [
    "collection_name",
    "platform_distribution",
    "airline_distribution",
    "compute_stats",
    "engagement_trends",
    "sentiment_slices",
    "compute_chart_data",
]
