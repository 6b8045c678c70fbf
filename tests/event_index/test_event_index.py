"""Tests for the background event index worker and retrieval."""

import asyncio

import pytest
from sqlalchemy.dialects import postgresql

from conftest import FakeLLM, make_event
from internal.event_index import Config, New
from internal.event_index.repository import NewMemory
from internal.event_index.repository.memory import cosine_similarity
from internal.event_index.repository.postgre.event_embedding_query import build_upsert_query
from pkg.llm.errors import ErrLLMRequestFailed


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def repository():
    return NewMemory()


@pytest.fixture
def index(llm, repository):
    return New(Config(queue_size=10, embed_timeout=0.5), repository, llm)


# ============================================================================
# Tests
# ============================================================================


class TestEnqueue:
    def test_accepts_events_with_text(self, index) -> None:
        events = [make_event("1", text="lounge was fine"), make_event("2", text="   ")]
        events[1].clean_event_text = ""

        assert index.enqueue(events) == 1
        status = index.status()
        assert status.queued == 1
        assert status.skipped == 1
        assert status.running is False

    def test_full_queue_drops_without_blocking(self, llm, repository) -> None:
        index = New(Config(queue_size=2), repository, llm)

        accepted = index.enqueue([make_event(str(i), text="security") for i in range(5)])

        assert accepted == 2
        assert index.status().dropped == 3

    def test_disabled_llm_skips_everything(self, repository) -> None:
        index = New(Config(), repository, FakeLLM(enabled=False))

        assert index.enqueue([make_event("1", text="lounge")]) == 0
        status = index.status()
        assert status.skipped == 1
        assert status.enabled is False

    def test_config_validation(self) -> None:
        with pytest.raises(ValueError):
            Config(queue_size=0)


class TestWorker:
    @pytest.mark.asyncio
    async def test_indexes_queued_events(self, index, repository) -> None:
        await index.start()
        index.enqueue([make_event("1", "Reddit", text="lounge food"), make_event("2", "Reddit", text="security delay")])
        await asyncio.wait_for(index.drain(), timeout=2)
        await index.stop()

        status = index.status()
        assert status.indexed == 2
        assert status.failed == 0
        assert status.running is False
        assert len(repository) == 2

    @pytest.mark.asyncio
    async def test_failures_are_counted_and_worker_survives(self, index, llm) -> None:
        await index.start()
        llm.fail = ErrLLMRequestFailed("embed: rate limited")
        index.enqueue([make_event("1", text="lounge")])
        await asyncio.wait_for(index.drain(), timeout=2)

        llm.fail = None
        index.enqueue([make_event("2", text="lounge")])
        await asyncio.wait_for(index.drain(), timeout=2)
        await index.stop()

        status = index.status()
        assert status.failed == 1
        assert status.indexed == 1
        assert "rate limited" in status.last_error

    @pytest.mark.asyncio
    async def test_embedding_timeout(self, llm, repository) -> None:
        index = New(Config(embed_timeout=0.05), repository, llm)
        llm.delay = 1.0

        await index.start()
        index.enqueue([make_event("1", text="lounge")])
        await asyncio.wait_for(index.drain(), timeout=2)
        await index.stop()

        assert index.status().failed == 1
        assert "timed out" in index.status().last_error

    @pytest.mark.asyncio
    async def test_start_is_idempotent(self, index) -> None:
        await index.start()
        first = index._worker
        await index.start()
        assert index._worker is first
        await index.stop()


class TestSearch:
    @pytest.mark.asyncio
    async def test_returns_most_similar_texts(self, index) -> None:
        await index.start()
        index.enqueue(
            [
                make_event("1", text="lounge lounge food"),
                make_event("2", text="security queue delay"),
                make_event("3", text="wifi in the lounge"),
            ]
        )
        await asyncio.wait_for(index.drain(), timeout=2)
        await index.stop()

        results = await index.search("security delay", limit=1)
        assert results == ["security queue delay"]

    @pytest.mark.asyncio
    async def test_search_failure_returns_empty(self, index, llm) -> None:
        llm.fail = ErrLLMRequestFailed("down")
        assert await index.search("lounge") == []

    @pytest.mark.asyncio
    async def test_blank_query(self, index, llm) -> None:
        assert await index.search("  ") == []
        assert llm.embed_calls == []


def test_cosine_similarity() -> None:
    assert cosine_similarity([1, 0], [1, 0]) == pytest.approx(1.0)
    assert cosine_similarity([1, 0], [0, 1]) == pytest.approx(0.0)
    assert cosine_similarity([0, 0], [1, 1]) == 0.0


def test_upsert_query_overwrites_by_id() -> None:
    stmt = build_upsert_query(
        {"id": "Reddit:1", "text": "t", "embedding": [0.0] * 3, "metadata": {}}
    )
    sql = str(stmt.compile(dialect=postgresql.dialect()))
    assert "ON CONFLICT (id) DO UPDATE" in sql
    assert "metadata = excluded.metadata" in sql
