from typing import List

from internal.collection.constant import *
from internal.model import SocialEvent
from internal.model.constant import PLATFORM_TAGS
from .base import BaseAgent


class TwitterAgent(BaseAgent):
    """Twitter API v2 recent search with a bearer token."""

    source = SOURCE_TWITTER
    platform = PLATFORM_TAGS[SOURCE_TWITTER]
    required_credentials = (CREDENTIAL_TWITTER_BEARER_TOKEN,)

    async def _collect(self, query: str) -> List[SocialEvent]:
        max_results = min(max(self.ctx.config.max_results, TWITTER_MIN_RESULTS), TWITTER_MAX_RESULTS)
        payload = await self.get_json(
            TWITTER_SEARCH_URL,
            params={
                "query": query,
                "max_results": max_results,
                "tweet.fields": "public_metrics,created_at,author_id",
                "expansions": "author_id",
                "user.fields": "username",
            },
            headers={
                "Authorization": f"Bearer {self.credentials[CREDENTIAL_TWITTER_BEARER_TOKEN]}",
                "User-Agent": self.user_agent(),
            },
        )

        usernames = {
            user["id"]: user.get("username")
            for user in (payload.get("includes") or {}).get("users") or []
        }

        events = []
        for tweet in payload.get("data") or []:
            if not tweet.get("id"):
                continue
            metrics = tweet.get("public_metrics") or {}
            username = usernames.get(tweet.get("author_id"))
            events.append(
                self.build_event(
                    event_id=tweet["id"],
                    content=tweet.get("text") or "",
                    author_id=tweet.get("author_id"),
                    author_name=f"@{username}" if username else None,
                    url=TWITTER_STATUS_URL.format(id=tweet["id"]),
                    likes=metrics.get("like_count", 0),
                    shares=metrics.get("retweet_count", 0),
                    comments=metrics.get("reply_count", 0),
                    timestamp=tweet.get("created_at"),
                )
            )
        return events


__all__ = ["TwitterAgent"]
