import asyncio
from datetime import datetime
from typing import Awaitable, Callable, List, Optional

from pkg.logger.logger import Logger
from internal.collection.interface import ICollectionUseCase
from internal.collection.type import CollectionResult, SchedulerConfig
from internal.model import utcnow

AfterRunHook = Callable[[], Awaitable[object]]


class Scheduler:
    """Periodic ``collect_all`` followed by an optional hook.

    At most one run is active: a tick that finds the previous run still
    going is skipped and logged. ``stop`` cancels the loop and any run in
    progress.
    """

    def __init__(
        self,
        config: SchedulerConfig,
        collection: ICollectionUseCase,
        after_run: Optional[AfterRunHook] = None,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.collection = collection
        self.after_run = after_run
        self.logger = logger

        self._loop_task: Optional[asyncio.Task] = None
        self._current: Optional[asyncio.Task] = None
        self.runs = 0
        self.skipped = 0
        self.last_run_at: Optional[datetime] = None

    @property
    def running(self) -> bool:
        return self._loop_task is not None and not self._loop_task.done()

    @property
    def busy(self) -> bool:
        return self._current is not None and not self._current.done()

    async def start(self) -> None:
        if self.running:
            return
        self._loop_task = asyncio.create_task(self._loop(), name="collection-scheduler")
        if self.logger:
            self.logger.info(
                "[Scheduler] Started",
                extra={"interval_seconds": self.config.interval_seconds},
            )

    async def stop(self) -> None:
        for task in (self._loop_task, self._current):
            if task is None or task.done():
                continue
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._loop_task = None
        self._current = None
        if self.logger:
            self.logger.info("[Scheduler] Stopped")

    async def _loop(self) -> None:
        if self.config.run_on_startup:
            self.tick()
        while True:
            await asyncio.sleep(self.config.interval_seconds)
            self.tick()

    def tick(self) -> bool:
        """Start a run in the background unless one is already active."""
        if self.busy:
            self.skipped += 1
            if self.logger:
                self.logger.warning("[Scheduler] Previous run still active, tick skipped")
            return False
        self._current = asyncio.create_task(self.run_once(), name="collection-run")
        return True

    async def run_once(self) -> List[CollectionResult]:
        self.runs += 1
        self.last_run_at = utcnow()
        try:
            results = await self.collection.collect_all()
        except Exception as exc:
            if self.logger:
                self.logger.exception(f"[Scheduler] Run failed: {exc}")
            return []

        if self.after_run is not None:
            try:
                await self.after_run()
            except Exception as exc:
                if self.logger:
                    self.logger.exception(f"[Scheduler] After-run hook failed: {exc}")
        return results

    def status(self) -> dict:
        return {
            "running": self.running,
            "busy": self.busy,
            "runs": self.runs,
            "skipped": self.skipped,
            "lastRunAt": self.last_run_at.isoformat() if self.last_run_at else None,
        }


__all__ = ["Scheduler", "AfterRunHook"]
