from internal.model.constant import (
    CATEGORY_EASE_OF_BOOKING,
    CATEGORY_CHECK_IN,
    CATEGORY_LUGGAGE_HANDLING,
    CATEGORY_SECURITY,
    CATEGORY_LOUNGE,
    CATEGORY_AMENITIES,
    CATEGORY_COMMUNICATION,
)

POSITIVE_WORDS = frozenset(
    [
        "good",
        "great",
        "excellent",
        "amazing",
        "best",
        "love",
        "fantastic",
        "awesome",
        "perfect",
        "smooth",
    ]
)

# "lost" is intentionally absent: it describes baggage, not mood
NEGATIVE_WORDS = frozenset(
    [
        "bad",
        "terrible",
        "worst",
        "hate",
        "awful",
        "horrible",
        "delayed",
        "damaged",
        "slow",
    ]
)

DEFAULT_CATEGORY_KEYWORDS = {
    CATEGORY_EASE_OF_BOOKING: ["booking", "book", "ticket", "reservation", "website", "app"],
    CATEGORY_CHECK_IN: ["check in", "check-in", "checkin", "counter", "kiosk", "boarding pass"],
    CATEGORY_LUGGAGE_HANDLING: ["baggage", "luggage", "bag", "lost bag", "damaged bag", "bag claim"],
    CATEGORY_SECURITY: ["security", "checkpoint", "screening", "queue", "wait time"],
    CATEGORY_LOUNGE: ["lounge", "premium", "business class", "vip"],
    CATEGORY_AMENITIES: ["wifi", "food", "restaurant", "shop", "facility", "clean"],
    CATEGORY_COMMUNICATION: ["staff", "service", "help", "information", "announcement"],
}

# Thresholds on the raw (pos - neg) / (pos + neg) ratio
DEFAULT_THRESHOLD_POSITIVE = 0.2
DEFAULT_THRESHOLD_NEGATIVE = -0.2

LABEL_POSITIVE = 1.0
LABEL_NEUTRAL = 0.0
LABEL_NEGATIVE = -1.0

PATTERN_TOKEN = r"[a-z0-9']+"
