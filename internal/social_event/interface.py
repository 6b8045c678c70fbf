"""Interface for Social Event use case."""

from datetime import datetime
from typing import List, Optional, Protocol, Sequence, runtime_checkable

from internal.model import SocialEvent
from .type import ChartData, DataStats


@runtime_checkable
class ISocialEventUseCase(Protocol):
    """Protocol for the event store."""

    # Writes
    async def store(self, platform: str, event: SocialEvent) -> bool:
        """Insert unless (event_id, platform) exists. True when inserted."""
        ...

    async def bulk_store(self, platform: str, events: Sequence[SocialEvent]) -> int:
        """Upsert a batch by key; returns how many keys were new."""
        ...

    async def clear(self, collection: str) -> int:
        ...

    # Reads
    async def get_all(self, limit: Optional[int] = None) -> List[SocialEvent]:
        """Every event, newest first by timestamp_utc (created_at fallback)."""
        ...

    async def list_since(
        self, since: datetime, collections: Optional[Sequence[str]] = None
    ) -> List[SocialEvent]:
        ...

    # Analytics
    async def get_data_stats(self) -> DataStats:
        ...

    async def get_chart_data(self) -> ChartData:
        ...


__all__ = ["ISocialEventUseCase"]
