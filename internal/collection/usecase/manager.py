from typing import Dict, List, Optional

from pkg.logger.logger import Logger
from internal.airport_config import AirportProfile
from internal.collection.errors import ErrUnknownSource
from internal.collection.interface import IAgentManager
from internal.model import SocialEvent
from ..agent import BaseAgent


class AgentManager(IAgentManager):
    """Registry of platform agents keyed by source name."""

    def __init__(
        self,
        agents: Dict[str, BaseAgent],
        airport: AirportProfile,
        logger: Optional[Logger] = None,
    ):
        self.agents = agents
        self.airport = airport
        self.logger = logger

    def supported_sources(self) -> List[str]:
        return list(self.agents)

    def get_agent(self, source: str) -> Optional[BaseAgent]:
        return self.agents.get(source)

    def _require_agent(self, source: str) -> BaseAgent:
        agent = self.get_agent(source)
        if agent is None:
            raise ErrUnknownSource(f"unsupported data source: {source}")
        return agent

    def set_credentials(self, source: str, credentials: Dict[str, str]) -> None:
        self._require_agent(source).set_credentials(credentials)

    def validate_credentials(self, source: str) -> bool:
        agent = self.get_agent(source)
        return agent is not None and agent.validate_credentials()

    def default_query(self) -> str:
        return self.airport.build_default_query()

    async def collect_data(self, source: str, query: Optional[str] = None) -> List[SocialEvent]:
        """Delegate to the source's agent.

        Raises:
            ErrUnknownSource: No agent for ``source``
            ErrInvalidCredentials: Credentials missing, nothing was fetched
            ErrCollectionFailed: Provider error
        """
        agent = self._require_agent(source)
        agent.require_credentials()

        query = query.strip() if query and query.strip() else self.default_query()
        if self.logger:
            self.logger.info(
                f"[AgentManager] Collecting from {source}",
                extra={"source": source, "query": query},
            )
        return await agent.collect_data(query)


__all__ = ["AgentManager"]
