from typing import List

from internal.collection.constant import SOURCE_INSHORTS
from internal.model import SocialEvent
from internal.model.constant import PLATFORM_TAGS
from .base import BaseAgent


class InshortsAgent(BaseAgent):
    """Inshorts has no public API; the agent is registered but yields nothing."""

    source = SOURCE_INSHORTS
    platform = PLATFORM_TAGS[SOURCE_INSHORTS]

    async def _collect(self, query: str) -> List[SocialEvent]:
        if self.logger:
            self.logger.info("[InshortsAgent] No public API available, nothing collected")
        return []


__all__ = ["InshortsAgent"]
