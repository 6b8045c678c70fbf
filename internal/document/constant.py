from typing import Dict, Final

COLLECTION_CONTACT_MESSAGES: Final[str] = "contact_messages"

# /api/weather/{kind} -> collection
WEATHER_COLLECTIONS: Final[Dict[str, str]] = {
    "forecast": "weather_forecast",
    "alerts": "weather_alerts",
    "correlation": "weather_correlation",
}

DEFAULT_LIST_LIMIT: Final[int] = 50
MAX_LIST_LIMIT: Final[int] = 1000
