from typing import Final

# Stats thresholds on overall_sentiment
POSITIVE_THRESHOLD: Final[float] = 0.1
NEGATIVE_THRESHOLD: Final[float] = -0.1

UNKNOWN_PLATFORM: Final[str] = "Unknown"

# Sentiment distribution chart
SENTIMENT_CHART_COLORS: Final[dict] = {
    "Positive": "#10b981",
    "Neutral": "#f59e0b",
    "Negative": "#ef4444",
}

# Batch size for ON CONFLICT upserts
UPSERT_BATCH_SIZE: Final[int] = 500
