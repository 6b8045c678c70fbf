from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constant import *


@dataclass
class Config:
    queue_size: int = DEFAULT_QUEUE_SIZE
    embed_timeout: float = DEFAULT_EMBED_TIMEOUT

    def __post_init__(self):
        if self.queue_size <= 0:
            raise ValueError("queue_size must be > 0")
        if self.embed_timeout <= 0:
            raise ValueError("embed_timeout must be > 0")


@dataclass
class IndexEntry:
    """One embedded event. ``id`` is "<platform>:<event_id>"."""

    id: str
    text: str
    embedding: List[float]
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class IndexStatus:
    """Worker counters since start.

    Attributes:
        queued: Items waiting in the queue right now
        indexed: Items embedded and stored
        skipped: Items with no text, or enqueued while embeddings are off
        dropped: Items rejected because the queue was full
        failed: Items whose embedding or storage failed or timed out
    """

    running: bool = False
    enabled: bool = False
    queued: int = 0
    indexed: int = 0
    skipped: int = 0
    dropped: int = 0
    failed: int = 0
    last_error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "running": self.running,
            "enabled": self.enabled,
            "queued": self.queued,
            "indexed": self.indexed,
            "skipped": self.skipped,
            "dropped": self.dropped,
            "failed": self.failed,
            "last_error": self.last_error,
        }


__all__ = [
    "Config",
    "IndexEntry",
    "IndexStatus",
]
