"""In-process social event repository.

Used when PostgreSQL is disabled or unreachable, and by tests. Data lives
only as long as the process.
"""

from typing import Dict, List, Optional, Tuple

from pkg.logger.logger import Logger
from internal.model import SocialEvent
from ..interface import ISocialEventRepository
from ..option import CreateOptions, DeleteOptions, ListOptions, UpsertManyOptions
from ..errors import ErrInvalidData


class SocialEventMemoryRepository(ISocialEventRepository):
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger = logger
        # (event_id, platform) -> (collection, event)
        self._events: Dict[Tuple[str, str], Tuple[str, SocialEvent]] = {}

    def __len__(self) -> int:
        return len(self._events)

    async def create(self, opt: CreateOptions) -> bool:
        if opt.event is None or not opt.collection:
            raise ErrInvalidData("collection and event are required")

        if opt.event.key in self._events:
            return False
        self._events[opt.event.key] = (opt.collection, opt.event)
        return True

    async def upsert_many(self, opt: UpsertManyOptions) -> int:
        if not opt.collection:
            raise ErrInvalidData("collection is required")

        new_keys = set()
        for event in opt.events:
            if event.key not in self._events:
                new_keys.add(event.key)
            self._events[event.key] = (opt.collection, event)

        if self.logger:
            self.logger.debug(
                f"[MemoryRepository] upsert_many: collection={opt.collection}, "
                f"total={len(opt.events)}, new={len(new_keys)}"
            )
        return len(new_keys)

    async def list(self, opt: ListOptions) -> List[SocialEvent]:
        collections = set(opt.collections)
        events = [
            event
            for collection, event in self._events.values()
            if not collections or collection in collections
        ]
        if opt.since is not None:
            events = [e for e in events if e.sort_time >= opt.since]

        events.sort(key=lambda e: e.sort_time, reverse=True)

        if opt.limit > 0:
            events = events[: opt.limit]
        return events

    async def delete(self, opt: DeleteOptions) -> int:
        if not opt.collection:
            raise ErrInvalidData("collection is required")

        keys = [k for k, (collection, _) in self._events.items() if collection == opt.collection]
        for key in keys:
            del self._events[key]
        return len(keys)


__all__ = ["SocialEventMemoryRepository"]
