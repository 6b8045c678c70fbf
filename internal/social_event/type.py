"""Types for Social Event domain."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class NameValue:
    name: str
    value: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value}


@dataclass
class DataStats:
    """Aggregate counters over every stored event.

    total_views is an approximation: likes + shares + comments.
    """

    total_events: int = 0
    total_likes: int = 0
    total_shares: int = 0
    total_comments: int = 0
    total_views: int = 0
    avg_sentiment: float = 0.0
    positive_count: int = 0
    negative_count: int = 0
    platform_distribution: List[NameValue] = field(default_factory=list)
    airline_distribution: List[NameValue] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalEvents": self.total_events,
            "totalLikes": self.total_likes,
            "totalShares": self.total_shares,
            "totalComments": self.total_comments,
            "totalViews": self.total_views,
            "avgSentiment": self.avg_sentiment,
            "positiveCount": self.positive_count,
            "negativeCount": self.negative_count,
            "platformDistribution": [d.to_dict() for d in self.platform_distribution],
            "airlineDistribution": [d.to_dict() for d in self.airline_distribution],
        }


@dataclass
class DailyEngagement:
    date: str  # YYYY-MM-DD (UTC)
    likes: int = 0
    shares: int = 0
    comments: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "likes": self.likes,
            "shares": self.shares,
            "comments": self.comments,
        }


@dataclass
class SentimentSlice:
    name: str
    value: int
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value, "color": self.color}


@dataclass
class ChartData:
    engagement_trends: List[DailyEngagement] = field(default_factory=list)
    sentiment_analysis: List[SentimentSlice] = field(default_factory=list)
    platform_performance: List[NameValue] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "engagementTrends": [d.to_dict() for d in self.engagement_trends],
            "sentimentAnalysis": [s.to_dict() for s in self.sentiment_analysis],
            "platformPerformance": [p.to_dict() for p in self.platform_performance],
        }


__all__ = [
    "NameValue",
    "DataStats",
    "DailyEngagement",
    "SentimentSlice",
    "ChartData",
]
