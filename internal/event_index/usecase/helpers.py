from typing import Any, Dict, Optional

from internal.model import SocialEvent
from internal.event_index.constant import MAX_TEXT_LENGTH


def entry_id(event: SocialEvent) -> str:
    return f"{event.platform}:{event.event_id}"


def index_text(event: SocialEvent) -> Optional[str]:
    """Raw content, falling back to the normalized text; None when both are blank."""
    text = (event.event_content or event.clean_event_text or "").strip()
    return text[:MAX_TEXT_LENGTH] if text else None


def index_metadata(event: SocialEvent) -> Dict[str, Any]:
    return {
        "event_id": event.event_id,
        "platform": event.platform,
        "timestamp": event.sort_time.isoformat(),
        "sentiment": event.overall_sentiment,
        "airline": event.airline_mentioned,
        "location": event.location_focus,
    }


__all__ = [
    "entry_id",
    "index_text",
    "index_metadata",
]
