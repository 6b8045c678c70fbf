from typing import List, Protocol, Sequence, runtime_checkable

from internal.model import SocialEvent
from .type import IndexStatus


@runtime_checkable
class IEventIndex(Protocol):
    """Background embedding index over collected events."""

    def enqueue(self, events: Sequence[SocialEvent]) -> int:
        """Queue events without blocking; returns how many were accepted."""
        ...

    async def start(self) -> None:
        ...

    async def stop(self) -> None:
        """Cancel the worker; items still queued are discarded."""
        ...

    def status(self) -> IndexStatus:
        ...

    async def search(self, query: str, limit: int = ...) -> List[str]:
        """Texts of the most similar indexed events, best first."""
        ...


__all__ = ["IEventIndex"]
