"""Shared agent behaviour: credential handling, HTTP helpers, event mapping."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import httpx

from internal.collection.constant import QUERY_SEPARATOR
from internal.collection.errors import ErrCollectionFailed, ErrInvalidCredentials
from internal.collection.type import AgentContext
from internal.model import (
    EngagementMetrics,
    ErrSocialEventValidation,
    SocialEvent,
    parse_datetime,
)


class BaseAgent(ABC):
    """One provider.

    Subclasses set ``source``/``platform``/``required_credentials`` and
    implement ``_collect``. ``collect_data`` enforces credentials first and
    turns transport or payload errors into ErrCollectionFailed.
    """

    source: str = ""
    platform: str = ""
    required_credentials: Tuple[str, ...] = ()

    def __init__(self, ctx: AgentContext, credentials: Optional[Dict[str, str]] = None):
        self.ctx = ctx
        self.http = ctx.http
        self.logger = ctx.logger
        self.credentials: Dict[str, str] = {}
        if credentials:
            self.set_credentials(credentials)

    def set_credentials(self, credentials: Dict[str, str]) -> None:
        self.credentials.update({k: v for k, v in credentials.items() if v})

    def missing_credentials(self) -> List[str]:
        return [key for key in self.required_credentials if not self.credentials.get(key)]

    def validate_credentials(self) -> bool:
        return not self.missing_credentials()

    def require_credentials(self) -> None:
        missing = self.missing_credentials()
        if missing:
            raise ErrInvalidCredentials(f"{self.source}: missing {', '.join(missing)}")

    async def collect_data(self, query: str) -> List[SocialEvent]:
        self.require_credentials()
        try:
            events = await self._collect(query)
        except httpx.HTTPError as exc:
            if self.logger:
                self.logger.error(f"[{type(self).__name__}] HTTP error: {exc}")
            raise ErrCollectionFailed(f"{self.source}: {exc}") from exc
        except (AttributeError, KeyError, TypeError, ValueError, ErrSocialEventValidation) as exc:
            if self.logger:
                self.logger.error(f"[{type(self).__name__}] Unexpected payload: {exc}")
            raise ErrCollectionFailed(f"{self.source}: unexpected response ({exc})") from exc

        if self.logger:
            self.logger.info(
                f"[{type(self).__name__}] Collected {len(events)} events",
                extra={"source": self.source},
            )
        return events

    @abstractmethod
    async def _collect(self, query: str) -> List[SocialEvent]:
        ...

    # HTTP helpers

    def user_agent(self, kind: str = "general") -> str:
        return self.ctx.airport.user_agent(kind)

    @staticmethod
    def json_object(response: httpx.Response) -> Dict[str, Any]:
        """Decoded body, which must be a JSON object.

        Raises:
            ValueError: If the body is not JSON or not an object
        """
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
        return payload

    async def get_json(self, url: str, **kwargs) -> Dict[str, Any]:
        response = await self.http.get(url, **kwargs)
        response.raise_for_status()
        return self.json_object(response)

    # Mapping

    def build_event(
        self,
        event_id: str,
        content: str,
        author_id: Optional[str] = None,
        author_name: Optional[str] = None,
        title: Optional[str] = None,
        url: Optional[str] = None,
        likes: Optional[int] = None,
        shares: Optional[int] = None,
        comments: Optional[int] = None,
        timestamp: Any = None,
    ) -> SocialEvent:
        """Normalize, score and tag one provider record."""
        content = content or ""
        clean = self.ctx.normalizer.normalize(content)
        context_text = f"{title} {content}" if title else content

        timestamp_utc: Optional[datetime]
        try:
            timestamp_utc = parse_datetime(timestamp)
        except ErrSocialEventValidation:
            timestamp_utc = None

        return SocialEvent(
            event_id=str(event_id),
            platform=self.platform,
            event_content=content,
            clean_event_text=clean,
            author_id=author_id,
            author_name=author_name,
            event_title=title,
            event_url=url,
            engagement_metrics=EngagementMetrics(likes=likes, shares=shares, comments=comments),
            sentiment_analysis=self.ctx.scorer.analyze(clean),
            location_focus=self.ctx.airport.extract_location_focus(context_text),
            airline_mentioned=self.ctx.airport.extract_airline_mention(context_text),
            timestamp_utc=timestamp_utc,
        )


def split_query(query: str) -> List[str]:
    """Split an OR-list query into lowercased terms."""
    return [term.strip().lower() for term in (query or "").split(QUERY_SEPARATOR) if term.strip()]


__all__ = ["BaseAgent", "split_query"]
