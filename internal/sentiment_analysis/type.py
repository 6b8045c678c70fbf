from dataclasses import dataclass, field
from typing import Dict, List, Optional

from internal.model import SentimentAnalysis
from .constant import *


def _default_categories() -> Dict[str, List[str]]:
    return {name: list(words) for name, words in DEFAULT_CATEGORY_KEYWORDS.items()}


@dataclass
class Config:
    """Configuration for keyword sentiment scoring."""

    category_keywords: Dict[str, List[str]] = field(default_factory=_default_categories)
    threshold_positive: float = DEFAULT_THRESHOLD_POSITIVE
    threshold_negative: float = DEFAULT_THRESHOLD_NEGATIVE

    def __post_init__(self):
        if not -1.0 <= self.threshold_negative < self.threshold_positive <= 1.0:
            raise ValueError(
                "thresholds must satisfy: -1.0 <= threshold_negative < threshold_positive <= 1.0"
            )
        if not self.category_keywords:
            raise ValueError("category_keywords cannot be empty")


@dataclass
class Input:
    text: str


@dataclass
class Output:
    """Keyword scoring result.

    Attributes:
        overall_sentiment: -1, 0 or 1 after thresholding raw_score
        sentiment_score: raw_score mapped linearly into [0, 1]
        raw_score: (pos - neg) / (pos + neg), 0 when nothing matched
        categories: overall_sentiment for categories whose keyword appears, else None
        positive_matches: matched positive tokens, in text order
        negative_matches: matched negative tokens, in text order
    """

    overall_sentiment: float
    sentiment_score: float
    raw_score: float
    categories: Dict[str, Optional[float]] = field(default_factory=dict)
    positive_matches: List[str] = field(default_factory=list)
    negative_matches: List[str] = field(default_factory=list)

    def to_model(self) -> SentimentAnalysis:
        return SentimentAnalysis(
            overall_sentiment=self.overall_sentiment,
            sentiment_score=self.sentiment_score,
            categories=dict(self.categories),
        )


__all__ = [
    "Config",
    "Input",
    "Output",
]
