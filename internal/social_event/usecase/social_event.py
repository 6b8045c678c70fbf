from datetime import datetime
from typing import List, Optional, Sequence

from pkg.logger.logger import Logger
from internal.model import SocialEvent
from internal.social_event.errors import ErrInvalidInput
from internal.social_event.interface import ISocialEventUseCase
from internal.social_event.type import ChartData, DataStats
from ..repository.interface import ISocialEventRepository
from ..repository.option import CreateOptions, DeleteOptions, ListOptions, UpsertManyOptions
from .helpers import collection_name, compute_chart_data, compute_stats


class SocialEventUseCase(ISocialEventUseCase):
    """Event store: de-duplicated persistence plus dashboard aggregates.

    ``platform`` arguments name the collection the events are filed under;
    source names ("zee_news") and platform tags ("Zee News") both resolve
    to the same collection.
    """

    def __init__(self, repository: ISocialEventRepository, logger: Optional[Logger] = None):
        self.repository = repository
        self.logger = logger

    def _collection(self, platform: str) -> str:
        name = collection_name(platform)
        if not name:
            raise ErrInvalidInput("platform is required")
        return name

    async def store(self, platform: str, event: SocialEvent) -> bool:
        if not isinstance(event, SocialEvent):
            raise ErrInvalidInput("event must be a SocialEvent")

        inserted = await self.repository.create(
            CreateOptions(collection=self._collection(platform), event=event)
        )
        if self.logger:
            self.logger.debug(
                f"[SocialEventUseCase] store {event.platform}:{event.event_id}",
                extra={"inserted": inserted},
            )
        return inserted

    async def bulk_store(self, platform: str, events: Sequence[SocialEvent]) -> int:
        collection = self._collection(platform)
        if not events:
            return 0

        new_count = await self.repository.upsert_many(
            UpsertManyOptions(collection=collection, events=list(events))
        )
        if self.logger:
            self.logger.info(
                f"[SocialEventUseCase] Stored {len(events)} events in {collection}",
                extra={"collection": collection, "new": new_count},
            )
        return new_count

    async def get_all(self, limit: Optional[int] = None) -> List[SocialEvent]:
        if limit is not None and limit < 0:
            raise ErrInvalidInput("limit must be >= 0")
        return await self.repository.list(ListOptions(limit=limit or 0))

    async def list_since(
        self, since: datetime, collections: Optional[Sequence[str]] = None
    ) -> List[SocialEvent]:
        return await self.repository.list(
            ListOptions(collections=list(collections or []), since=since)
        )

    async def clear(self, collection: str) -> int:
        removed = await self.repository.delete(
            DeleteOptions(collection=self._collection(collection))
        )
        if self.logger:
            self.logger.info(f"[SocialEventUseCase] Cleared {removed} events from {collection}")
        return removed

    async def get_data_stats(self) -> DataStats:
        return compute_stats(await self.get_all())

    async def get_chart_data(self) -> ChartData:
        return compute_chart_data(await self.get_all())


__all__ = ["SocialEventUseCase"]
