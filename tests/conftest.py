"""Shared fixtures for unit tests."""

import asyncio
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

import pytest

from internal.airport_config import AirportProfile, Load
from internal.model import EngagementMetrics, SentimentAnalysis, SocialEvent

REPO_ROOT = Path(__file__).resolve().parents[1]
AIRPORT_CONFIG_PATH = REPO_ROOT / "config" / "airport.yaml"


@pytest.fixture(scope="session")
def airport() -> AirportProfile:
    """AirportProfile built from the shipped airport.yaml."""
    return Load(str(AIRPORT_CONFIG_PATH))


def make_event(
    event_id: str = "1",
    platform: str = "Reddit",
    text: str = "sample text",
    likes: Optional[int] = 0,
    shares: Optional[int] = 0,
    comments: Optional[int] = 0,
    sentiment: float = 0.0,
    categories: Optional[dict] = None,
    airline: Optional[str] = None,
    age_days: float = 1.0,
    now: Optional[datetime] = None,
) -> SocialEvent:
    """Build a SocialEvent with the fields tests usually care about."""
    now = now or datetime.now(timezone.utc)
    return SocialEvent(
        event_id=event_id,
        platform=platform,
        event_content=text,
        clean_event_text=text,
        engagement_metrics=EngagementMetrics(likes=likes, shares=shares, comments=comments),
        sentiment_analysis=SentimentAnalysis(
            overall_sentiment=sentiment,
            sentiment_score=(sentiment + 1) / 2,
            categories=categories or {},
        ),
        airline_mentioned=airline,
        timestamp_utc=now - timedelta(days=age_days),
    )


class FakeLLM:
    """In-process ILLM: bag-of-words embeddings over a tiny vocabulary.

    ``chat_reply`` is returned by chat(); set ``fail`` to an exception
    instance to make both calls raise it, ``delay`` to make embed slow.
    """

    VOCABULARY = ["lounge", "security", "baggage", "food", "delay", "wifi"]

    def __init__(self, enabled: bool = True, chat_reply: str = "LLM answer"):
        self._enabled = enabled
        self.chat_reply = chat_reply
        self.fail: Optional[Exception] = None
        self.delay: float = 0.0
        self.chat_calls: list = []
        self.embed_calls: list = []

    @property
    def enabled(self) -> bool:
        return self._enabled

    async def chat(self, messages, max_tokens: int = 500, temperature: float = 0.7) -> str:
        self.chat_calls.append(list(messages))
        if self.fail is not None:
            raise self.fail
        return self.chat_reply

    async def embed(self, text: str) -> list:
        self.embed_calls.append(text)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail is not None:
            raise self.fail
        words = text.lower().split()
        # Constant last component keeps every vector non-zero
        return [float(sum(w.startswith(v) for w in words)) for v in self.VOCABULARY] + [0.1]

    async def close(self) -> None:
        pass
