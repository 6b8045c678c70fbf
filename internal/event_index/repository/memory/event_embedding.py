import math
from typing import Dict, List, Optional, Sequence

from pkg.logger.logger import Logger
from internal.event_index.type import IndexEntry
from ..interface import IEventIndexRepository
from ..option import SearchOptions, UpsertOptions


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    dot = sum(x * y for x, y in zip(a, b))
    norm = math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b))
    return dot / norm if norm else 0.0


class EventEmbeddingMemoryRepository(IEventIndexRepository):
    """Brute-force cosine index kept in process memory."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger = logger
        self._entries: Dict[str, IndexEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    async def upsert(self, opt: UpsertOptions) -> None:
        self._entries[opt.entry.id] = opt.entry

    async def search(self, opt: SearchOptions) -> List[IndexEntry]:
        ranked = sorted(
            self._entries.values(),
            key=lambda e: cosine_similarity(opt.embedding, e.embedding),
            reverse=True,
        )
        return ranked[: opt.limit]


__all__ = ["EventEmbeddingMemoryRepository", "cosine_similarity"]
