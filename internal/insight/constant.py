from typing import Dict, Final

# Analysis window
DEFAULT_LOOKBACK_DAYS: Final[int] = 30
DEFAULT_RECENT_DAYS: Final[int] = 7
DEFAULT_TOP_N: Final[int] = 5
DEFAULT_CACHE_TTL: Final[int] = 3600

# Flag thresholds; every comparison is strict
SENTIMENT_DROP_THRESHOLD: Final[float] = -0.2
CATEGORY_ISSUE_SENTIMENT: Final[float] = -0.3
CATEGORY_ISSUE_MIN_MENTIONS: Final[int] = 5
OPPORTUNITY_SENTIMENT: Final[float] = 0.5
OPPORTUNITY_MIN_MENTIONS: Final[int] = 3
AIRLINE_ALERT_SENTIMENT: Final[float] = -0.3
AIRLINE_ALERT_MIN_MENTIONS: Final[int] = 3
HIGH_SEVERITY_SENTIMENT: Final[float] = -0.5
EXCEPTIONAL_SENTIMENT: Final[float] = 0.7
HIGH_ENGAGEMENT: Final[float] = 100.0
EXCEPTIONAL_ENGAGEMENT: Final[float] = 200.0

# Flag kinds
FLAG_SENTIMENT_DROP: Final[str] = "sentiment_drop"
FLAG_CATEGORY_ISSUE: Final[str] = "category_issue"
FLAG_POSITIVE_CATEGORY: Final[str] = "positive_category"
FLAG_AIRLINE_ISSUE: Final[str] = "airline_issue"

SEVERITY_HIGH: Final[str] = "high"
SEVERITY_MEDIUM: Final[str] = "medium"

# Insight types and colors
TYPE_OPTIMIZATION: Final[str] = "optimization"
TYPE_STRATEGY: Final[str] = "strategy"
TYPE_ENGAGEMENT: Final[str] = "engagement"

COLOR_RED: Final[str] = "red"
COLOR_YELLOW: Final[str] = "yellow"
COLOR_BLUE: Final[str] = "blue"
COLOR_GREEN: Final[str] = "green"

# Priority weights
COLOR_WEIGHTS: Final[Dict[str, int]] = {
    COLOR_RED: 100,
    COLOR_YELLOW: 70,
    COLOR_BLUE: 50,
    COLOR_GREEN: 30,
}
TYPE_WEIGHTS: Final[Dict[str, int]] = {
    TYPE_OPTIMIZATION: 80,
    TYPE_STRATEGY: 60,
    TYPE_ENGAGEMENT: 40,
}
HIGH_SEVERITY_BONUS: Final[int] = 50
MANY_MENTIONS_BONUS: Final[int] = 30
MANY_MENTIONS_THRESHOLD: Final[int] = 10
STRONG_SENTIMENT_BONUS: Final[int] = 20
STRONG_SENTIMENT_THRESHOLD: Final[float] = 0.5

# Cache
CACHE_KEY: Final[str] = "insights:latest"
GENERATION_METHOD: Final[str] = "agentic_ai"
