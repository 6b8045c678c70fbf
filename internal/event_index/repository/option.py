from dataclasses import dataclass, field
from typing import List, Optional

from internal.event_index.type import IndexEntry


@dataclass
class UpsertOptions:
    entry: Optional[IndexEntry] = None


@dataclass
class SearchOptions:
    """Nearest neighbours of ``embedding`` by cosine distance."""

    embedding: List[float] = field(default_factory=list)
    limit: int = 5


__all__ = [
    "UpsertOptions",
    "SearchOptions",
]
