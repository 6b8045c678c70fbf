"""Tests for insight analysis, flag rules, priorities and caching."""

from datetime import datetime, timedelta, timezone

import pytest

from conftest import make_event
from internal.insight import Config, GroupStats, Insight, InsightReport, New
from internal.insight.type import Analysis, PlatformStats, SentimentTrend
from internal.insight.usecase.rules import (
    build_insights,
    detect_flags,
    format_category,
    prioritize,
    priority_score,
)
from internal.insight.constant import CACHE_KEY
from internal.social_event import New as NewEvents
from internal.social_event.repository import NewMemory
from pkg.redis.memory import MemoryCache


NOW = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def events():
    return NewEvents(NewMemory())


@pytest.fixture
def cache():
    return MemoryCache()


@pytest.fixture
def usecase(events, airport, cache):
    return New(Config(), events, airport, cache)


class BrokenEvents:
    async def list_since(self, since, collections=None):
        raise RuntimeError("database down")


def display_name(slug: str) -> str:
    return slug.title()


def analysis_with(categories=None, airlines=None, recent=0.0, previous=0.0, platforms=None):
    return Analysis(
        total_events=10,
        recent_events=5,
        sentiment=SentimentTrend(recent=recent, previous=previous),
        categories=categories or {},
        airlines=airlines or {},
        platforms=platforms or {},
    )


# ============================================================================
# Tests
# ============================================================================


class TestPriority:
    def test_red_optimization_high_severity(self) -> None:
        insight = Insight(
            id="1",
            type="optimization",
            title="t",
            description="d",
            action_text="a",
            color="red",
            raw_data={"severity": "high", "mentions": 12, "sentiment": -0.6},
        )
        assert priority_score(insight) == 280

    def test_green_strategy_without_bonuses(self) -> None:
        insight = Insight(
            id="1",
            type="strategy",
            title="t",
            description="d",
            action_text="a",
            color="green",
            raw_data={"mentions": 10, "sentiment": 0.5},
        )
        assert priority_score(insight) == 90

    def test_sort_is_stable(self) -> None:
        insights = [
            Insight(id=str(i), type="engagement", title="t", description="d", action_text="a", color="blue")
            for i in range(3)
        ]
        assert [i.id for i in prioritize(insights)] == ["0", "1", "2"]


class TestFlags:
    def test_sentiment_drop(self) -> None:
        flags = detect_flags(analysis_with(recent=-0.5, previous=0.0))

        assert [f.kind for f in flags] == ["sentiment_drop"]
        assert flags[0].severity == "high"

    def test_sentiment_drop_boundary_is_strict(self) -> None:
        assert detect_flags(analysis_with(recent=-0.2, previous=0.0)) == []

    @pytest.mark.parametrize(
        "sentiment,mentions,expected",
        [
            (-0.31, 6, ["category_issue"]),
            (-0.3, 6, []),
            (-0.6, 5, []),
            (0.51, 4, ["positive_category"]),
            (0.5, 4, []),
            (0.9, 3, []),
        ],
    )
    def test_category_thresholds(self, sentiment, mentions, expected) -> None:
        stats = GroupStats(mention_count=mentions, average_sentiment=sentiment)
        flags = detect_flags(analysis_with(categories={"security": stats}))
        assert [f.kind for f in flags] == expected

    def test_category_severity(self) -> None:
        flags = detect_flags(
            analysis_with(
                categories={
                    "security": GroupStats(mention_count=6, average_sentiment=-0.6),
                    "lounge": GroupStats(mention_count=6, average_sentiment=-0.4),
                }
            )
        )
        assert [f.severity for f in flags] == ["high", "medium"]

    def test_airline_alert(self) -> None:
        flags = detect_flags(
            analysis_with(airlines={"indigo": GroupStats(mention_count=4, average_sentiment=-0.4)})
        )
        assert flags[0].kind == "airline_issue"
        assert flags[0].raw["airline"] == "indigo"
        assert flags[0].severity == "medium"


class TestTemplates:
    def test_format_category(self) -> None:
        assert format_category("luggage_handling") == "Luggage Handling"

    def test_insight_per_flag(self) -> None:
        analysis = analysis_with(
            recent=-0.5,
            categories={
                "luggage_handling": GroupStats(mention_count=8, average_sentiment=-0.7),
                "lounge": GroupStats(mention_count=4, average_sentiment=0.8),
            },
            airlines={"spicejet": GroupStats(mention_count=5, average_sentiment=-0.4)},
        )

        insights = build_insights(analysis, display_name)

        assert [(i.title, i.color, i.type) for i in insights] == [
            ("Address Overall Sentiment Decline", "red", "optimization"),
            ("Improve Luggage Handling", "red", "optimization"),
            ("Leverage Lounge Excellence", "green", "strategy"),
            ("Address Spicejet Service Issues", "yellow", "optimization"),
        ]
        assert [i.id for i in insights] == ["1", "2", "3", "4"]
        assert "declined by 50.0%" in insights[0].description
        assert "(-70%) across 8 recent mentions" in insights[1].description
        assert "exceptional positive feedback (+80%)" in insights[2].description

    def test_strategic_insight_needs_high_average(self) -> None:
        busy = analysis_with(
            platforms={
                "Twitter": PlatformStats(event_count=2, total_engagement=300),
                "Reddit": PlatformStats(event_count=1, total_engagement=0),
            }
        )
        quiet = analysis_with(
            platforms={"Twitter": PlatformStats(event_count=2, total_engagement=100)}
        )

        insights = build_insights(busy, display_name)

        assert [i.title for i in insights] == ["Capitalize on High Social Engagement"]
        assert insights[0].raw_data == {"totalEngagement": 300, "avgEngagement": 150.0}
        assert build_insights(quiet, display_name) == []


class TestInsightUseCase:
    @pytest.mark.asyncio
    async def test_generate_from_store(self, usecase, events) -> None:
        complaints = [
            make_event(f"c{i}", "Twitter", text="security queue was terrible", sentiment=-1, age_days=2, now=NOW)
            for i in range(6)
        ]
        older = [
            make_event(f"o{i}", "Reddit", text="smooth trip", sentiment=1, age_days=20, now=NOW)
            for i in range(3)
        ]
        stale = [make_event("x", "Reddit", text="security", sentiment=-1, age_days=45, now=NOW)]
        await events.bulk_store("twitter", complaints)
        await events.bulk_store("reddit", older + stale)

        report = await usecase.generate(now=NOW)

        assert report.total_events_analyzed == 9
        assert report.recent_events == 6
        # category issue: 100 + 80 + 50 + 20; sentiment drop: 100 + 80 + 50
        assert [(i.title, i.priority) for i in report.insights] == [
            ("Improve Security", 250),
            ("Address Overall Sentiment Decline", 230),
        ]
        assert report.to_dict()["metadata"]["generationMethod"] == "agentic_ai"

    @pytest.mark.asyncio
    async def test_empty_store(self, usecase) -> None:
        report = await usecase.generate(now=NOW)
        assert report.insights == []
        assert report.total_events_analyzed == 0

    @pytest.mark.asyncio
    async def test_failed_read_yields_empty_report(self, airport, cache) -> None:
        usecase = New(Config(), BrokenEvents(), airport, cache)

        report = await usecase.generate(now=NOW)

        assert report.total_events_analyzed == 0

    @pytest.mark.asyncio
    async def test_top_n(self, events, airport, cache) -> None:
        usecase = New(Config(top_n=1), events, airport, cache)
        await events.bulk_store(
            "twitter",
            [make_event(f"c{i}", "Twitter", text="security queue", sentiment=-1, age_days=1, now=NOW) for i in range(6)]
            + [make_event(f"o{i}", "Twitter", text="nice", sentiment=1, age_days=10, now=NOW) for i in range(3)],
        )

        report = await usecase.generate(now=NOW)

        assert len(report.insights) == 1

    @pytest.mark.asyncio
    async def test_cached_until_refresh(self, usecase, events, cache) -> None:
        first = await usecase.get_insights()
        assert await cache.get_json(CACHE_KEY) == first.to_dict()

        await events.bulk_store(
            "twitter",
            [make_event(f"c{i}", "Twitter", text="security queue", sentiment=-1, age_days=1) for i in range(6)]
            + [make_event(f"o{i}", "Twitter", text="nice", sentiment=1, age_days=10) for i in range(3)],
        )

        cached = await usecase.get_insights()
        assert cached.insights == []

        refreshed = await usecase.get_insights(refresh=True)
        assert refreshed.insights
        assert InsightReport.from_dict(await cache.get_json(CACHE_KEY)).insights[0].title == (
            refreshed.insights[0].title
        )

    def test_config_validation(self) -> None:
        with pytest.raises(ValueError):
            Config(lookback_days=7, recent_days=7)
