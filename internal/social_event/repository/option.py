"""Options structs for social_event repository operations.

Convention: UseCase passes Options -> Repository builds query from Options.
Repository returns model.SocialEvent (domain model), never raw DB types.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from internal.model import SocialEvent


@dataclass
class CreateOptions:
    """Insert one event into ``collection`` unless its key already exists."""

    collection: str = ""
    event: Optional[SocialEvent] = None


@dataclass
class UpsertManyOptions:
    """Insert or overwrite a batch of events keyed by (event_id, platform)."""

    collection: str = ""
    events: List[SocialEvent] = field(default_factory=list)


@dataclass
class ListOptions:
    """Options for listing events, newest first.

    Empty ``collections`` means every collection; limit <= 0 means no limit.
    """

    collections: List[str] = field(default_factory=list)
    since: Optional[datetime] = None
    limit: int = 0


@dataclass
class DeleteOptions:
    collection: str = ""


__all__ = [
    "CreateOptions",
    "UpsertManyOptions",
    "ListOptions",
    "DeleteOptions",
]
