"""Interfaces for Collection domain.

Convention: agents, the manager and the collection use case are separate
protocols; the API and scheduler only see ICollectionUseCase.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from internal.model import SocialEvent
from .type import CollectionResult


@runtime_checkable
class IAgent(Protocol):
    source: str
    platform: str

    def set_credentials(self, credentials: Dict[str, str]) -> None:
        """Merge non-empty values into the agent's credentials."""
        ...

    def validate_credentials(self) -> bool:
        ...

    async def collect_data(self, query: str) -> List[SocialEvent]:
        """Fetch and map provider records.

        Raises:
            ErrInvalidCredentials: Before any network call
            ErrCollectionFailed: On provider or payload errors
        """
        ...


@runtime_checkable
class IAgentManager(Protocol):
    def supported_sources(self) -> List[str]:
        ...

    def get_agent(self, source: str) -> Optional[IAgent]:
        ...

    def set_credentials(self, source: str, credentials: Dict[str, str]) -> None:
        ...

    def validate_credentials(self, source: str) -> bool:
        ...

    def default_query(self) -> str:
        ...

    async def collect_data(self, source: str, query: Optional[str] = None) -> List[SocialEvent]:
        ...


@runtime_checkable
class ICollectionUseCase(Protocol):
    async def collect(
        self,
        source: str,
        credentials: Optional[Dict[str, str]] = None,
        query: Optional[str] = None,
    ) -> CollectionResult:
        ...

    async def collect_all(self) -> List[CollectionResult]:
        """Collect every source whose credentials are valid, one after another."""
        ...


__all__ = [
    "IAgent",
    "IAgentManager",
    "ICollectionUseCase",
]
