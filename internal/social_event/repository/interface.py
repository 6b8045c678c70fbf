"""Repository interface for social_event domain."""

from typing import List, Protocol, runtime_checkable

from internal.model import SocialEvent
from .option import CreateOptions, DeleteOptions, ListOptions, UpsertManyOptions


@runtime_checkable
class ISocialEventRepository(Protocol):
    """Protocol for social event persistence.

    Rules:
    - (event_id, platform) identifies an event across all collections.
    - Return model.SocialEvent, never raw DB types.
    """

    async def create(self, opt: CreateOptions) -> bool:
        """Insert if absent.

        Returns:
            True if a row was inserted, False if the key already existed
        """
        ...

    async def upsert_many(self, opt: UpsertManyOptions) -> int:
        """Insert or overwrite by key.

        Returns:
            Number of keys that did not exist before the call
        """
        ...

    async def list(self, opt: ListOptions) -> List[SocialEvent]:
        """List events ordered by timestamp_utc (created_at fallback), newest first."""
        ...

    async def delete(self, opt: DeleteOptions) -> int:
        """Delete every event in a collection; returns rows removed."""
        ...


__all__ = ["ISocialEventRepository"]
