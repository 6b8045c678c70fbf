from typing import Dict

from internal.collection.constant import *
from internal.collection.type import AgentContext
from .base import BaseAgent, split_query
from .facebook import FacebookAgent
from .inshorts import InshortsAgent
from .news_rss import NewsRSSAgent, news_event_id
from .reddit import RedditAgent
from .twitter import TwitterAgent


def build_agents(ctx: AgentContext) -> Dict[str, BaseAgent]:
    """One agent per supported source, keyed and ordered by source name."""
    agents: Dict[str, BaseAgent] = {
        SOURCE_TWITTER: TwitterAgent(ctx),
        SOURCE_REDDIT: RedditAgent(ctx),
        SOURCE_FACEBOOK: FacebookAgent(ctx),
    }
    for source in [SOURCE_CNN] + RSS_FEED_SOURCES:
        agents[source] = NewsRSSAgent(ctx, source)
    agents[SOURCE_INSHORTS] = InshortsAgent(ctx)
    return {source: agents[source] for source in SOURCES}


__all__ = [
    "BaseAgent",
    "TwitterAgent",
    "RedditAgent",
    "FacebookAgent",
    "NewsRSSAgent",
    "InshortsAgent",
    "build_agents",
    "news_event_id",
    "split_query",
]
