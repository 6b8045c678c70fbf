from typing import Dict, List, Optional

from pkg.logger.logger import Logger
from internal.collection.errors import ErrCollectionFailed
from internal.collection.interface import IAgentManager, ICollectionUseCase
from internal.collection.type import CollectionResult
from internal.event_index import IEventIndex
from internal.social_event import ISocialEventUseCase


class CollectionUseCase(ICollectionUseCase):
    """Collect from a source, persist the events and queue them for indexing.

    Provider failures become a CollectionResult with ``error`` set. Unknown
    sources and missing credentials are raised to the caller.
    """

    def __init__(
        self,
        manager: IAgentManager,
        events: ISocialEventUseCase,
        index: Optional[IEventIndex] = None,
        logger: Optional[Logger] = None,
    ):
        self.manager = manager
        self.events = events
        self.index = index
        self.logger = logger

    async def collect(
        self,
        source: str,
        credentials: Optional[Dict[str, str]] = None,
        query: Optional[str] = None,
    ) -> CollectionResult:
        if credentials:
            self.manager.set_credentials(source, credentials)

        try:
            events = await self.manager.collect_data(source, query)
        except ErrCollectionFailed as exc:
            if self.logger:
                self.logger.warning(f"[CollectionUseCase] {source} failed: {exc}")
            return CollectionResult(source=source, error=str(exc))

        stored = await self.events.bulk_store(source, events) if events else 0
        queued = self.index.enqueue(events) if self.index is not None and events else 0

        if self.logger:
            self.logger.info(
                f"[CollectionUseCase] {source}: collected {len(events)}, new {stored}",
                extra={"source": source, "queued": queued},
            )
        return CollectionResult(source=source, events=events, stored=stored, queued=queued)

    async def collect_all(self) -> List[CollectionResult]:
        results = []
        for source in self.manager.supported_sources():
            if not self.manager.validate_credentials(source):
                if self.logger:
                    self.logger.debug(f"[CollectionUseCase] Skipping {source}: no credentials")
                continue
            try:
                results.append(await self.collect(source))
            except Exception as exc:
                if self.logger:
                    self.logger.exception(f"[CollectionUseCase] {source} aborted: {exc}")
                results.append(CollectionResult(source=source, error=str(exc)))

        if self.logger:
            self.logger.info(
                f"[CollectionUseCase] Run finished for {len(results)} sources",
                extra={"events": sum(len(r.events) for r in results)},
            )
        return results


__all__ = ["CollectionUseCase"]
