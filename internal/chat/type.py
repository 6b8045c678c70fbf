"""Types for Chat domain."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from internal.model import utcnow
from .constant import *


@dataclass
class Config:
    history_size: int = DEFAULT_HISTORY_SIZE
    max_sessions: int = DEFAULT_MAX_SESSIONS

    def __post_init__(self):
        if self.history_size < 0:
            raise ValueError("history_size must be >= 0")
        if self.max_sessions <= 0:
            raise ValueError("max_sessions must be > 0")


@dataclass
class Turn:
    role: str
    content: str


@dataclass
class ChatReply:
    """``source`` tells which path answered: rejected, topic, llm or fallback."""

    response: str
    source: str
    topic: Optional[str] = None
    timestamp: datetime = field(default_factory=utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "response": self.response,
            "timestamp": self.timestamp.isoformat(),
        }


__all__ = ["Config", "Turn", "ChatReply"]
