from typing import List, Protocol, runtime_checkable

from internal.event_index.type import IndexEntry
from .option import SearchOptions, UpsertOptions


@runtime_checkable
class IEventIndexRepository(Protocol):
    async def upsert(self, opt: UpsertOptions) -> None:
        """Insert or replace the entry with the same id."""
        ...

    async def search(self, opt: SearchOptions) -> List[IndexEntry]:
        """Closest entries first."""
        ...


__all__ = ["IEventIndexRepository"]
