from typing import Dict, List

import httpx

from internal.collection.constant import *
from internal.collection.errors import ErrCollectionFailed
from internal.model import SocialEvent
from internal.model.constant import PLATFORM_TAGS
from .base import BaseAgent


class RedditAgent(BaseAgent):
    """Reddit search over the configured airport/airline terms plus the query.

    Authenticates with the client-credentials grant. A failing search term
    is logged and skipped; only a token failure or every term failing
    aborts the run. Posts found by several terms are kept once.
    """

    source = SOURCE_REDDIT
    platform = PLATFORM_TAGS[SOURCE_REDDIT]
    required_credentials = (CREDENTIAL_REDDIT_CLIENT_ID, CREDENTIAL_REDDIT_CLIENT_SECRET)

    async def _access_token(self) -> str:
        response = await self.http.post(
            REDDIT_TOKEN_URL,
            auth=(
                self.credentials[CREDENTIAL_REDDIT_CLIENT_ID],
                self.credentials[CREDENTIAL_REDDIT_CLIENT_SECRET],
            ),
            data={"grant_type": "client_credentials", "scope": "read"},
            headers={"User-Agent": self.user_agent("reddit")},
        )
        response.raise_for_status()
        token = self.json_object(response).get("access_token")
        if not token:
            raise ErrCollectionFailed(f"{self.source}: token response has no access_token")
        return token

    def search_terms(self, query: str) -> List[str]:
        terms = []
        for term in self.ctx.airport.reddit_search_terms() + [query]:
            if term and term not in terms:
                terms.append(term)
        return terms

    async def _collect(self, query: str) -> List[SocialEvent]:
        token = await self._access_token()
        headers = {"Authorization": f"Bearer {token}", "User-Agent": self.user_agent("reddit")}

        posts: Dict[str, dict] = {}
        terms = self.search_terms(query)
        failures = 0
        for term in terms:
            try:
                payload = await self.get_json(
                    REDDIT_SEARCH_URL,
                    params={
                        "q": term,
                        "type": "link",
                        "sort": "new",
                        "limit": self.ctx.config.max_results,
                    },
                    headers=headers,
                )
            except (httpx.HTTPError, ValueError) as exc:
                failures += 1
                if self.logger:
                    self.logger.warning(f"[RedditAgent] Search failed for {term!r}: {exc}")
                continue

            for child in ((payload.get("data") or {}).get("children")) or []:
                post = child.get("data") or {}
                if post.get("id"):
                    posts.setdefault(post["id"], post)

        if terms and failures == len(terms):
            raise ErrCollectionFailed(f"{self.source}: all {failures} searches failed")

        events = []
        for post_id, post in posts.items():
            text = post.get("selftext") or post.get("title") or ""
            events.append(
                self.build_event(
                    event_id=post_id,
                    content=text,
                    author_id=post.get("author"),
                    author_name=post.get("author"),
                    title=post.get("title"),
                    url=f"{REDDIT_BASE_URL}{post['permalink']}" if post.get("permalink") else None,
                    likes=post.get("ups", 0),
                    shares=0,
                    comments=post.get("num_comments", 0),
                    timestamp=post.get("created_utc"),
                )
            )
        return events


__all__ = ["RedditAgent"]
