import calendar
import hashlib
from typing import List, Optional

import feedparser

from internal.collection.constant import *
from internal.collection.errors import ErrCollectionFailed
from internal.collection.type import AgentContext
from internal.model import SocialEvent
from internal.model.constant import PLATFORM_TAGS
from .base import BaseAgent, split_query


def news_event_id(entry) -> Optional[str]:
    """Stable id from the item link, falling back to its guid."""
    key = entry.get("link") or entry.get("id")
    if not key:
        return None
    return hashlib.sha256(key.encode("utf-8")).hexdigest()[:NEWS_EVENT_ID_LENGTH]


def entry_timestamp(entry) -> Optional[int]:
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if not parsed:
        return None
    return calendar.timegm(parsed)


class NewsRSSAgent(BaseAgent):
    """RSS feed filtered down to items about the airport or its airlines.

    One class serves every feed; ``source`` picks the platform tag, the
    default feed URL from the airport config and the credential that may
    override it. CNN additionally requires an API key.
    """

    def __init__(self, ctx: AgentContext, source: str, credentials=None):
        self.source = source
        self.platform = PLATFORM_TAGS[source]
        if source == SOURCE_CNN:
            self.required_credentials = (CREDENTIAL_CNN_API_KEY,)
        else:
            self.required_credentials = ()
        super().__init__(ctx, credentials)

    @property
    def url_credential(self) -> str:
        return f"{self.source}{RSS_URL_CREDENTIAL_SUFFIX}"

    def feed_url(self) -> Optional[str]:
        return self.credentials.get(self.url_credential) or self.ctx.airport.news_feed_url(self.source)

    def missing_credentials(self) -> List[str]:
        missing = super().missing_credentials()
        if not self.feed_url():
            missing.append(self.url_credential)
        return missing

    def matches(self, text: str, keywords: List[str]) -> bool:
        text = text.lower()
        return any(keyword in text for keyword in keywords)

    async def _collect(self, query: str) -> List[SocialEvent]:
        response = await self.http.get(
            self.feed_url(), headers={"User-Agent": self.user_agent("news")}
        )
        response.raise_for_status()

        feed = feedparser.parse(response.content)
        if feed.bozo and not feed.entries:
            raise ErrCollectionFailed(f"{self.source}: unreadable feed ({feed.get('bozo_exception')})")

        keywords = [k.lower() for k in self.ctx.airport.news_keywords()] + split_query(query)
        author = NEWS_AUTHOR_NAMES.get(self.source, self.platform)

        events = []
        for entry in feed.entries[: self.ctx.config.max_results]:
            title = entry.get("title") or ""
            summary = entry.get("summary") or entry.get("description") or ""
            if not self.matches(f"{title} {summary}", keywords):
                continue
            event_id = news_event_id(entry)
            if event_id is None:
                continue
            events.append(
                self.build_event(
                    event_id=event_id,
                    content=summary or title,
                    author_id=self.source,
                    author_name=author,
                    title=title or None,
                    url=entry.get("link"),
                    timestamp=entry_timestamp(entry),
                )
            )
        return events


__all__ = ["NewsRSSAgent", "news_event_id"]
