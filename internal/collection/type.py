"""Types for Collection domain."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from pkg.logger.logger import Logger
from internal.airport_config import AirportProfile
from internal.model import SocialEvent
from internal.sentiment_analysis import ISentimentAnalysis
from internal.text_preprocessing import ITextProcessing
from .constant import *


@dataclass
class Config:
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    max_results: int = DEFAULT_MAX_RESULTS

    def __post_init__(self):
        if self.http_timeout <= 0:
            raise ValueError("http_timeout must be > 0")
        if self.max_results <= 0:
            raise ValueError("max_results must be > 0")


@dataclass
class SchedulerConfig:
    interval_seconds: int = DEFAULT_SCHEDULE_INTERVAL
    run_on_startup: bool = False

    def __post_init__(self):
        if self.interval_seconds <= 0:
            raise ValueError("interval_seconds must be > 0")


@dataclass
class AgentContext:
    """Everything an agent needs besides its credentials."""

    http: httpx.AsyncClient
    airport: AirportProfile
    normalizer: ITextProcessing
    scorer: ISentimentAnalysis
    config: Config = field(default_factory=Config)
    logger: Optional[Logger] = None


@dataclass
class CollectionResult:
    """Outcome of one collection run.

    ``error`` is set (and ``events`` empty) when the provider failed.
    ``stored`` counts keys that were new to the event store, ``queued``
    the events accepted by the index queue.
    """

    source: str
    events: List[SocialEvent] = field(default_factory=list)
    error: Optional[str] = None
    stored: int = 0
    queued: int = 0

    @property
    def success(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "success": self.success,
            "source": self.source,
            "eventsCollected": len(self.events),
            "eventsStored": self.stored,
            "events": [e.to_dict() for e in self.events],
        }
        if self.error is not None:
            data["error"] = self.error
        return data


__all__ = [
    "Config",
    "SchedulerConfig",
    "AgentContext",
    "CollectionResult",
]
