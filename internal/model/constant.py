from typing import Final, List

# Logger configuration
LOGGER_SERVICE_NAME: Final[str] = "airport-sentiment-srv"
LOGGER_ENABLE_CONSOLE: Final[bool] = True

# PostgreSQL
POSTGRES_EXTENSIONS: Final[List[str]] = ["vector"]

# Sentiment categories, in display order
CATEGORY_EASE_OF_BOOKING: Final[str] = "ease_of_booking"
CATEGORY_CHECK_IN: Final[str] = "check_in"
CATEGORY_LUGGAGE_HANDLING: Final[str] = "luggage_handling"
CATEGORY_SECURITY: Final[str] = "security"
CATEGORY_LOUNGE: Final[str] = "lounge"
CATEGORY_AMENITIES: Final[str] = "amenities"
CATEGORY_COMMUNICATION: Final[str] = "communication"

SENTIMENT_CATEGORIES: Final[List[str]] = [
    CATEGORY_EASE_OF_BOOKING,
    CATEGORY_CHECK_IN,
    CATEGORY_LUGGAGE_HANDLING,
    CATEGORY_SECURITY,
    CATEGORY_LOUNGE,
    CATEGORY_AMENITIES,
    CATEGORY_COMMUNICATION,
]

# Source name -> platform tag stored on each event
PLATFORM_TAGS: Final[dict] = {
    "twitter": "Twitter",
    "reddit": "Reddit",
    "facebook": "Facebook",
    "cnn": "CNN",
    "aajtak": "Aaj Tak",
    "wion": "WION",
    "zee_news": "Zee News",
    "ndtv": "NDTV",
    "inshorts": "Inshorts",
}

# Collections the insight aggregator reads from
INSIGHT_COLLECTIONS: Final[List[str]] = [
    "twitter",
    "reddit",
    "facebook",
    "cnn",
    "wion",
    "inshorts",
    "aajtak",
    "zee_news",
    "ndtv",
]

EMBEDDING_DIMENSIONS: Final[int] = 1536
