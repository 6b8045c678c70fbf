from datetime import datetime, timedelta
from typing import List, Optional

from pkg.logger.logger import Logger
from pkg.redis.interface import ICache
from internal.airport_config import AirportProfile, compile_keyword_pattern
from internal.model import SocialEvent, utcnow
from internal.model.constant import INSIGHT_COLLECTIONS
from internal.insight.constant import *
from internal.insight.interface import IInsightUseCase
from internal.insight.type import Config, InsightReport
from internal.social_event import ISocialEventUseCase
from .helpers import analyze
from .rules import build_insights, prioritize


class InsightUseCase(IInsightUseCase):
    """Rule-based insight generation over the last ``lookback_days`` of events.

    Reports are cached under CACHE_KEY for ``cache_ttl`` seconds. A failed
    event read is logged and analyzed as an empty window.
    """

    def __init__(
        self,
        config: Config,
        events: ISocialEventUseCase,
        airport: AirportProfile,
        cache: ICache,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.events = events
        self.airport = airport
        self.cache = cache
        self.logger = logger

        self.category_patterns = {}
        for name, words in airport.category_keywords().items():
            pattern = compile_keyword_pattern(words)
            if pattern is not None:
                self.category_patterns[name] = pattern
        self.airline_patterns = {}
        for slug, words in airport.airline_keywords().items():
            pattern = compile_keyword_pattern(words)
            if pattern is not None:
                self.airline_patterns[slug] = pattern

    async def _load_events(self, since: datetime) -> List[SocialEvent]:
        try:
            return await self.events.list_since(since, INSIGHT_COLLECTIONS)
        except Exception as exc:
            if self.logger:
                self.logger.error(f"[InsightUseCase] Failed to read events: {exc}")
            return []

    async def generate(self, now: Optional[datetime] = None) -> InsightReport:
        now = now or utcnow()
        events = await self._load_events(now - timedelta(days=self.config.lookback_days))

        analysis = analyze(
            events,
            recent_since=now - timedelta(days=self.config.recent_days),
            category_patterns=self.category_patterns,
            airline_patterns=self.airline_patterns,
        )
        insights = prioritize(build_insights(analysis, self.airport.airline_display_name))

        if self.logger:
            self.logger.info(
                f"[InsightUseCase] Generated {len(insights)} insights from {analysis.total_events} events",
                extra={"recent_events": analysis.recent_events},
            )
        return InsightReport(
            insights=insights[: self.config.top_n],
            total_events_analyzed=analysis.total_events,
            recent_events=analysis.recent_events,
            analysis_timestamp=now,
        )

    async def refresh(self) -> InsightReport:
        report = await self.generate()
        stored = await self.cache.set(CACHE_KEY, report.to_dict(), ttl=self.config.cache_ttl or None)
        if not stored and self.logger:
            self.logger.warning("[InsightUseCase] Report not cached")
        return report

    async def get_insights(self, refresh: bool = False) -> InsightReport:
        if not refresh:
            cached = await self.cache.get_json(CACHE_KEY)
            if cached:
                try:
                    return InsightReport.from_dict(cached)
                except (KeyError, TypeError, ValueError) as exc:
                    if self.logger:
                        self.logger.warning(f"[InsightUseCase] Ignoring unreadable cache entry: {exc}")
        return await self.refresh()


__all__ = ["InsightUseCase"]
