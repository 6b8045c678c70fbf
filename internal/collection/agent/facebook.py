from typing import List

from internal.collection.constant import *
from internal.model import SocialEvent
from internal.model.constant import PLATFORM_TAGS
from .base import BaseAgent


def _summary_count(post: dict, field: str) -> int:
    return ((post.get(field) or {}).get("summary") or {}).get("total_count", 0)


class FacebookAgent(BaseAgent):
    """Graph API post search. Failures surface as ErrCollectionFailed."""

    source = SOURCE_FACEBOOK
    platform = PLATFORM_TAGS[SOURCE_FACEBOOK]
    required_credentials = (CREDENTIAL_FACEBOOK_ACCESS_TOKEN,)

    async def _collect(self, query: str) -> List[SocialEvent]:
        payload = await self.get_json(
            FACEBOOK_SEARCH_URL,
            params={
                "q": query,
                "type": "post",
                "access_token": self.credentials[CREDENTIAL_FACEBOOK_ACCESS_TOKEN],
                "fields": FACEBOOK_FIELDS,
                "limit": self.ctx.config.max_results,
            },
            headers={"User-Agent": self.user_agent()},
        )

        events = []
        for post in payload.get("data") or []:
            if not post.get("id"):
                continue
            author = post.get("from") or {}
            events.append(
                self.build_event(
                    event_id=post["id"],
                    content=post.get("message") or post.get("story") or "",
                    author_id=author.get("id"),
                    author_name=author.get("name"),
                    url=post.get("permalink_url") or FACEBOOK_POST_URL.format(id=post["id"]),
                    likes=_summary_count(post, "likes"),
                    shares=(post.get("shares") or {}).get("count", 0),
                    comments=_summary_count(post, "comments"),
                    timestamp=post.get("created_time"),
                )
            )
        return events


__all__ = ["FacebookAgent"]
