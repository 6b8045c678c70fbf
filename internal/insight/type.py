"""Types for Insight domain."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .constant import *


@dataclass
class Config:
    lookback_days: int = DEFAULT_LOOKBACK_DAYS
    recent_days: int = DEFAULT_RECENT_DAYS
    top_n: int = DEFAULT_TOP_N
    cache_ttl: int = DEFAULT_CACHE_TTL

    def __post_init__(self):
        if self.recent_days <= 0:
            raise ValueError("recent_days must be > 0")
        if self.lookback_days <= self.recent_days:
            raise ValueError("lookback_days must be > recent_days")
        if self.top_n <= 0:
            raise ValueError("top_n must be > 0")
        if self.cache_ttl < 0:
            raise ValueError("cache_ttl must be >= 0")


@dataclass
class SentimentTrend:
    recent: float = 0.0
    previous: float = 0.0

    @property
    def weekly_change(self) -> float:
        return self.recent - self.previous


@dataclass
class GroupStats:
    """Events matching one category or airline keyword set."""

    mention_count: int = 0
    average_sentiment: float = 0.0
    recent_mentions: int = 0


@dataclass
class PlatformStats:
    event_count: int = 0
    total_engagement: int = 0
    avg_engagement: float = 0.0
    avg_sentiment: float = 0.0


@dataclass
class Analysis:
    total_events: int = 0
    recent_events: int = 0
    sentiment: SentimentTrend = field(default_factory=SentimentTrend)
    categories: Dict[str, GroupStats] = field(default_factory=dict)
    airlines: Dict[str, GroupStats] = field(default_factory=dict)
    platforms: Dict[str, PlatformStats] = field(default_factory=dict)


@dataclass
class Flag:
    """A detected pattern; ``raw`` is what the insight carries as rawData."""

    kind: str
    raw: Dict[str, Any]

    @property
    def severity(self) -> Optional[str]:
        return self.raw.get("severity")


@dataclass
class Insight:
    id: str
    type: str
    title: str
    description: str
    action_text: str
    color: str
    raw_data: Dict[str, Any] = field(default_factory=dict)
    priority: int = 0
    business_impact: str = "Low"
    urgency: str = "Low"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "actionText": self.action_text,
            "color": self.color,
            "priority": self.priority,
            "businessImpact": self.business_impact,
            "urgency": self.urgency,
            "rawData": self.raw_data,
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Insight":
        return cls(
            id=str(raw["id"]),
            type=raw["type"],
            title=raw["title"],
            description=raw.get("description", ""),
            action_text=raw.get("actionText", ""),
            color=raw["color"],
            raw_data=dict(raw.get("rawData") or {}),
            priority=int(raw.get("priority", 0)),
            business_impact=raw.get("businessImpact", "Low"),
            urgency=raw.get("urgency", "Low"),
        )


@dataclass
class InsightReport:
    insights: List[Insight] = field(default_factory=list)
    total_events_analyzed: int = 0
    recent_events: int = 0
    analysis_timestamp: Optional[datetime] = None
    generation_method: str = GENERATION_METHOD

    def to_dict(self) -> Dict[str, Any]:
        return {
            "insights": [i.to_dict() for i in self.insights],
            "metadata": {
                "totalEventsAnalyzed": self.total_events_analyzed,
                "recentEvents": self.recent_events,
                "analysisTimestamp": (
                    self.analysis_timestamp.isoformat() if self.analysis_timestamp else None
                ),
                "generationMethod": self.generation_method,
            },
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "InsightReport":
        metadata = raw.get("metadata") or {}
        timestamp = metadata.get("analysisTimestamp")
        return cls(
            insights=[Insight.from_dict(i) for i in raw.get("insights") or []],
            total_events_analyzed=int(metadata.get("totalEventsAnalyzed", 0)),
            recent_events=int(metadata.get("recentEvents", 0)),
            analysis_timestamp=datetime.fromisoformat(timestamp) if timestamp else None,
            generation_method=metadata.get("generationMethod", GENERATION_METHOD),
        )


__all__ = [
    "Config",
    "SentimentTrend",
    "GroupStats",
    "PlatformStats",
    "Analysis",
    "Flag",
    "Insight",
    "InsightReport",
]
