import asyncio
from typing import List, Optional, Sequence, Tuple

from pkg.llm.interface import ILLM
from pkg.logger.logger import Logger
from internal.model import SocialEvent
from internal.event_index.constant import *
from internal.event_index.interface import IEventIndex
from internal.event_index.type import Config, IndexEntry, IndexStatus
from ..repository.interface import IEventIndexRepository
from ..repository.option import SearchOptions, UpsertOptions
from .helpers import entry_id, index_metadata, index_text

_QueueItem = Tuple[str, str, dict]


class EventIndex(IEventIndex):
    """Embeds collected events on a background worker for chat retrieval.

    ``enqueue`` never blocks the caller: a full queue drops the item and
    counts it. Each embedding call is bounded by ``config.embed_timeout``.
    When the LLM client has no API key every enqueued item is skipped and
    ``search`` returns nothing.
    """

    def __init__(
        self,
        config: Config,
        repository: IEventIndexRepository,
        llm: ILLM,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.repository = repository
        self.llm = llm
        self.logger = logger

        self._queue: "asyncio.Queue[_QueueItem]" = asyncio.Queue(maxsize=config.queue_size)
        self._worker: Optional[asyncio.Task] = None
        self._indexed = 0
        self._skipped = 0
        self._dropped = 0
        self._failed = 0
        self._last_error: Optional[str] = None

    # Producer side

    def enqueue(self, events: Sequence[SocialEvent]) -> int:
        if not self.llm.enabled:
            self._skipped += len(events)
            return 0

        accepted = 0
        for event in events:
            text = index_text(event)
            if text is None:
                self._skipped += 1
                continue
            try:
                self._queue.put_nowait((entry_id(event), text, index_metadata(event)))
                accepted += 1
            except asyncio.QueueFull:
                self._dropped += 1

        if accepted < len(events) and self.logger:
            self.logger.warning(
                f"[EventIndex] Accepted {accepted}/{len(events)} events",
                extra={"dropped": self._dropped, "queued": self._queue.qsize()},
            )
        return accepted

    # Worker lifecycle

    async def start(self) -> None:
        if self._worker is not None and not self._worker.done():
            return
        self._worker = asyncio.create_task(self._run(), name=WORKER_TASK_NAME)
        if self.logger:
            self.logger.info(
                "[EventIndex] Worker started",
                extra={"enabled": self.llm.enabled, "queue_size": self.config.queue_size},
            )

    async def stop(self) -> None:
        if self._worker is None:
            return
        self._worker.cancel()
        try:
            await self._worker
        except asyncio.CancelledError:
            pass
        self._worker = None
        if self.logger:
            self.logger.info(
                "[EventIndex] Worker stopped",
                extra={"pending": self._queue.qsize(), "indexed": self._indexed},
            )

    async def drain(self) -> None:
        """Wait until every queued item has been processed."""
        await self._queue.join()

    def status(self) -> IndexStatus:
        return IndexStatus(
            running=self._worker is not None and not self._worker.done(),
            enabled=self.llm.enabled,
            queued=self._queue.qsize(),
            indexed=self._indexed,
            skipped=self._skipped,
            dropped=self._dropped,
            failed=self._failed,
            last_error=self._last_error,
        )

    async def _run(self) -> None:
        while True:
            item = await self._queue.get()
            try:
                await self._index_one(item)
            finally:
                self._queue.task_done()

    async def _index_one(self, item: _QueueItem) -> None:
        id_, text, metadata = item
        try:
            embedding = await asyncio.wait_for(
                self.llm.embed(text), timeout=self.config.embed_timeout
            )
            await self.repository.upsert(
                UpsertOptions(
                    entry=IndexEntry(id=id_, text=text, embedding=embedding, metadata=metadata)
                )
            )
            self._indexed += 1
        except asyncio.TimeoutError:
            self._record_failure(id_, f"embedding timed out after {self.config.embed_timeout}s")
        except Exception as exc:
            self._record_failure(id_, str(exc) or type(exc).__name__)

    def _record_failure(self, id_: str, message: str) -> None:
        self._failed += 1
        self._last_error = message
        if self.logger:
            self.logger.warning(f"[EventIndex] Failed to index {id_}: {message}")

    # Retrieval

    async def search(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> List[str]:
        """Best effort: any embedding or storage failure yields []."""
        if not self.llm.enabled or not query or not query.strip():
            return []
        limit = min(max(limit, 1), MAX_SEARCH_LIMIT)

        try:
            embedding = await asyncio.wait_for(
                self.llm.embed(query.strip()), timeout=self.config.embed_timeout
            )
            entries = await self.repository.search(
                SearchOptions(embedding=embedding, limit=limit)
            )
        except asyncio.TimeoutError:
            if self.logger:
                self.logger.warning("[EventIndex] Search embedding timed out")
            return []
        except Exception as exc:
            if self.logger:
                self.logger.warning(f"[EventIndex] Search failed: {exc}")
            return []

        return [entry.text for entry in entries]


__all__ = ["EventIndex"]
