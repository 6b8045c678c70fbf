"""Tests for the agent manager, the collection use case and the scheduler."""

import asyncio

import httpx
import pytest

from conftest import FakeLLM
from internal.collection import (
    AgentContext,
    CollectionResult,
    Config,
    ErrInvalidCredentials,
    ErrUnknownSource,
    New,
    NewAgentManager,
    NewScheduler,
    SchedulerConfig,
)
from internal.collection.constant import SOURCES
from internal.event_index import Config as IndexConfig
from internal.event_index import New as NewEventIndex
from internal.event_index.repository import NewMemory as NewIndexMemory
from internal.sentiment_analysis import New as NewScorer
from internal.social_event import New as NewEvents
from internal.social_event.repository import NewMemory as NewEventsMemory
from internal.text_preprocessing import New as NewNormalizer


# ============================================================================
# Fixtures
# ============================================================================


TWEETS = {
    "data": [
        {"id": "1", "text": "Lounge at Bangalore airport was excellent", "author_id": "u1"},
        {"id": "2", "text": "Security queue was terrible", "author_id": "u2"},
    ],
    "includes": {"users": [{"id": "u1", "username": "alice"}]},
}


class Handler:
    def __init__(self, status: int = 200, payload=None):
        self.status = status
        self.payload = payload if payload is not None else TWEETS
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status != 200:
            return httpx.Response(self.status)
        return httpx.Response(200, json=self.payload)


@pytest.fixture
def handler() -> Handler:
    return Handler()


@pytest.fixture
def manager(airport, handler):
    ctx = AgentContext(
        http=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        airport=airport,
        normalizer=NewNormalizer(),
        scorer=NewScorer(),
        config=Config(),
    )
    return NewAgentManager(ctx)


@pytest.fixture
def events():
    return NewEvents(NewEventsMemory())


@pytest.fixture
def index():
    return NewEventIndex(IndexConfig(queue_size=10), NewIndexMemory(), FakeLLM())


@pytest.fixture
def collection(manager, events, index):
    return New(manager, events, index)


class FakeCollection:
    """collect_all blocks until ``release`` is set."""

    def __init__(self):
        self.release = asyncio.Event()
        self.calls = 0

    async def collect_all(self):
        self.calls += 1
        await self.release.wait()
        return [CollectionResult(source="twitter")]

    async def collect(self, source, credentials=None, query=None):
        raise NotImplementedError


# ============================================================================
# Tests
# ============================================================================


class TestAgentManager:
    def test_registry_order(self, manager) -> None:
        assert manager.supported_sources() == SOURCES

    def test_unknown_source(self, manager) -> None:
        assert manager.get_agent("myspace") is None
        assert manager.validate_credentials("myspace") is False
        with pytest.raises(ErrUnknownSource):
            manager.set_credentials("myspace", {"token": "x"})

    @pytest.mark.asyncio
    async def test_collect_unknown_source(self, manager) -> None:
        with pytest.raises(ErrUnknownSource):
            await manager.collect_data("myspace")

    @pytest.mark.asyncio
    async def test_collect_without_credentials(self, manager, handler) -> None:
        with pytest.raises(ErrInvalidCredentials):
            await manager.collect_data("twitter")
        assert handler.requests == []

    @pytest.mark.asyncio
    async def test_default_query_when_none_given(self, manager, handler, airport) -> None:
        manager.set_credentials("twitter", {"twitter_bearer_token": "tok"})

        await manager.collect_data("twitter", "   ")

        assert handler.requests[0].url.params["query"] == airport.build_default_query()

    def test_seeded_credentials(self, airport, handler) -> None:
        ctx = AgentContext(
            http=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
            airport=airport,
            normalizer=NewNormalizer(),
            scorer=NewScorer(),
        )
        manager = NewAgentManager(ctx, {"twitter_bearer_token": "tok"})

        assert manager.validate_credentials("twitter") is True
        assert manager.validate_credentials("reddit") is False

    def test_new_requires_context(self) -> None:
        with pytest.raises(ValueError):
            NewAgentManager(None)


class TestCollectionUseCase:
    @pytest.mark.asyncio
    async def test_collect_stores_and_queues(self, collection, events, index) -> None:
        result = await collection.collect(
            "twitter", credentials={"twitter_bearer_token": "tok"}, query="lounge"
        )

        assert result.success is True
        assert len(result.events) == 2
        assert result.stored == 2
        assert result.queued == 2
        assert index.status().queued == 2
        assert len(await events.get_all()) == 2

        body = result.to_dict()
        assert body["eventsCollected"] == 2
        assert "error" not in body

    @pytest.mark.asyncio
    async def test_repeat_collect_stores_nothing_new(self, collection, events) -> None:
        creds = {"twitter_bearer_token": "tok"}
        await collection.collect("twitter", credentials=creds)

        result = await collection.collect("twitter")

        assert result.stored == 0
        assert len(await events.get_all()) == 2

    @pytest.mark.asyncio
    async def test_provider_failure_becomes_result(self, collection, handler, events) -> None:
        handler.status = 500

        result = await collection.collect("twitter", credentials={"twitter_bearer_token": "tok"})

        assert result.success is False
        assert result.events == []
        assert result.to_dict()["error"]
        assert await events.get_all() == []

    @pytest.mark.asyncio
    async def test_missing_credentials_raise(self, collection) -> None:
        with pytest.raises(ErrInvalidCredentials):
            await collection.collect("facebook")

    @pytest.mark.asyncio
    async def test_collect_all_runs_configured_sources(self, collection, manager) -> None:
        manager.set_credentials("twitter", {"twitter_bearer_token": "tok"})

        results = await collection.collect_all()

        # cnn needs a key; the other feeds have default URLs from airport.yaml
        sources = [r.source for r in results]
        assert "twitter" in sources
        assert "inshorts" in sources
        assert "reddit" not in sources
        assert "cnn" not in sources

    def test_new_validates(self, manager, events) -> None:
        with pytest.raises(ValueError):
            New(None, events)
        with pytest.raises(ValueError):
            New(manager, None)


class TestScheduler:
    @pytest.mark.asyncio
    async def test_overlapping_tick_is_skipped(self) -> None:
        fake = FakeCollection()
        scheduler = NewScheduler(SchedulerConfig(interval_seconds=3600), fake)

        assert scheduler.tick() is True
        await asyncio.sleep(0)
        assert scheduler.tick() is False
        assert scheduler.skipped == 1

        fake.release.set()
        await scheduler._current
        assert scheduler.busy is False
        assert scheduler.tick() is True
        await scheduler._current
        assert fake.calls == 2

    @pytest.mark.asyncio
    async def test_after_run_hook(self) -> None:
        fake = FakeCollection()
        fake.release.set()
        calls = []

        async def refresh():
            calls.append("refresh")

        scheduler = NewScheduler(SchedulerConfig(), fake, after_run=refresh)
        results = await scheduler.run_once()

        assert [r.source for r in results] == ["twitter"]
        assert calls == ["refresh"]
        assert scheduler.status()["runs"] == 1

    @pytest.mark.asyncio
    async def test_failing_hook_keeps_results(self) -> None:
        fake = FakeCollection()
        fake.release.set()

        async def refresh():
            raise RuntimeError("cache down")

        scheduler = NewScheduler(SchedulerConfig(), fake, after_run=refresh)
        results = await scheduler.run_once()

        assert [r.source for r in results] == ["twitter"]
        assert fake.calls == 1

    @pytest.mark.asyncio
    async def test_failed_run_is_contained(self) -> None:
        class Broken(FakeCollection):
            async def collect_all(self):
                raise RuntimeError("boom")

        scheduler = NewScheduler(SchedulerConfig(), Broken())

        assert await scheduler.run_once() == []

    @pytest.mark.asyncio
    async def test_stop_cancels_loop_and_run(self) -> None:
        fake = FakeCollection()
        scheduler = NewScheduler(SchedulerConfig(interval_seconds=3600, run_on_startup=True), fake)

        await scheduler.start()
        await asyncio.sleep(0.01)
        assert scheduler.running is True
        assert scheduler.busy is True

        await scheduler.stop()

        assert scheduler.running is False
        assert scheduler.busy is False
        assert fake.calls == 1

    def test_interval_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            SchedulerConfig(interval_seconds=0)
