from . import airport, analytics, chat, collection, contact, health, insights, social_events, weather

__all__ = [
    "airport",
    "analytics",
    "chat",
    "collection",
    "contact",
    "health",
    "insights",
    "social_events",
    "weather",
]
