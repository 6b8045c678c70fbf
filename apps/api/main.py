import asyncio
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI

from pkg.llm.llm import OpenAILLM
from pkg.llm.type import LLMConfig as LLMPkgConfig
from pkg.logger.logger import Logger, LoggerConfig
from pkg.postgre.postgres import PostgresDatabase
from pkg.postgre.type import PostgresConfig
from pkg.redis.memory import MemoryCache
from pkg.redis.redis import RedisCache
from pkg.redis.type import RedisConfig as RedisPkgConfig
from config.config import load_config, Config
from internal import airport_config, chat, collection, document, event_index, insight, social_event
from internal import sentiment_analysis, text_preprocessing
from internal.api import Dependencies, create_app
from internal.document import repository as document_repository
from internal.event_index import repository as index_repository
from internal.model import Base
from internal.model.constant import (
    LOGGER_ENABLE_CONSOLE,
    LOGGER_SERVICE_NAME,
    POSTGRES_EXTENSIONS,
)
from internal.social_event import repository as event_repository


async def init_database(config: Config, logger: Logger) -> Optional[PostgresDatabase]:
    """Connect to PostgreSQL and ensure the schema.

    Returns None (in-memory mode) when the database is disabled or does not
    answer the health check.
    """
    if not config.database.enabled:
        logger.warning("PostgreSQL disabled, using in-memory repositories")
        return None

    db = PostgresDatabase(
        PostgresConfig(
            database_url=config.database.url,
            schema=config.database.schema,
            pool_size=config.database.pool_size,
            max_overflow=config.database.max_overflow,
        )
    )
    if not await db.health_check():
        logger.warning("PostgreSQL health check failed, using in-memory repositories")
        await db.close()
        return None

    await db.create_all(Base.metadata, POSTGRES_EXTENSIONS)
    logger.info("PostgreSQL connection verified")
    return db


async def init_cache(config: Config, logger: Logger):
    if not config.redis.enabled:
        logger.warning("Redis disabled, using in-memory cache")
        return MemoryCache()

    redis = RedisCache(
        RedisPkgConfig(
            host=config.redis.host,
            port=config.redis.port,
            db=config.redis.db,
            password=config.redis.password,
            max_connections=config.redis.max_connections,
        )
    )
    if not await redis.health_check():
        logger.warning("Redis health check failed, using in-memory cache")
        await redis.close()
        return MemoryCache()

    logger.info("Redis connection verified")
    return redis


async def init_dependencies(config: Config) -> Dependencies:
    """Initialize all service dependencies.

    Args:
        config: Application configuration

    Returns:
        Dependencies struct with all initialized instances
    """
    # Initialize logger
    logger = Logger(
        LoggerConfig(
            level=config.logging.level,
            enable_console=LOGGER_ENABLE_CONSOLE,
            colorize=config.logging.colorize,
            serialize=config.logging.serialize,
            service_name=LOGGER_SERVICE_NAME,
        )
    )
    logger.info("Logger initialized")

    airport = airport_config.Load(config.airport.config_path, logger)

    db = await init_database(config, logger)
    cache = await init_cache(config, logger)

    llm = OpenAILLM(
        LLMPkgConfig(
            api_key=config.llm.api_key,
            base_url=config.llm.base_url,
            chat_model=config.llm.chat_model,
            embedding_model=config.llm.embedding_model,
        )
    )

    # Repositories
    if db is not None:
        events_repo = event_repository.New(db, logger)
        documents_repo = document_repository.New(db, logger)
        index_repo = index_repository.New(db, logger)
    else:
        events_repo = event_repository.NewMemory(logger)
        documents_repo = document_repository.NewMemory(logger)
        index_repo = index_repository.NewMemory(logger)

    # Use cases
    events = social_event.New(events_repo, logger)
    documents = document.New(documents_repo, logger)
    index = event_index.New(
        event_index.Config(
            queue_size=config.index.queue_size,
            embed_timeout=config.index.embed_timeout,
        ),
        index_repo,
        llm,
        logger,
    )
    active_index = index if config.index.enabled else None

    http = httpx.AsyncClient(timeout=config.collection.http_timeout, follow_redirects=True)
    ctx = collection.AgentContext(
        http=http,
        airport=airport,
        normalizer=text_preprocessing.New(logger=logger),
        scorer=sentiment_analysis.New(
            sentiment_analysis.Config(category_keywords=airport.category_keywords()),
            logger,
        ),
        config=collection.Config(
            http_timeout=config.collection.http_timeout,
            max_results=config.collection.max_results,
        ),
        logger=logger,
    )
    manager = collection.NewAgentManager(ctx, config.credentials.as_dict())
    collector = collection.New(manager, events, active_index, logger)

    insights = insight.New(
        insight.Config(
            lookback_days=config.insight.lookback_days,
            recent_days=config.insight.recent_days,
            top_n=config.insight.top_n,
            cache_ttl=config.insight.cache_ttl,
        ),
        events,
        airport,
        cache,
        logger,
    )
    assistant = chat.New(
        chat.Config(
            history_size=config.chat.history_size,
            max_sessions=config.chat.max_sessions,
        ),
        airport,
        events,
        llm,
        active_index,
        logger,
    )

    scheduler = None
    if config.scheduler.enabled:
        scheduler = collection.NewScheduler(
            collection.SchedulerConfig(
                interval_seconds=config.scheduler.interval_seconds,
                run_on_startup=config.scheduler.run_on_startup,
            ),
            collector,
            after_run=insights.refresh,
            logger=logger,
        )

    return Dependencies(
        logger=logger,
        airport=airport,
        events=events,
        documents=documents,
        collection=collector,
        insight=insights,
        chat=assistant,
        index=index,
        cache=cache,
        db=db,
        scheduler=scheduler,
        llm=llm,
        http=http,
        service_name=LOGGER_SERVICE_NAME,
    )


async def close_dependencies(deps: Dependencies) -> None:
    """Release network clients; safe to call with partially used deps."""
    logger = deps.logger
    logger.info("Cleaning up dependencies...")
    if deps.http is not None:
        await deps.http.aclose()
    if deps.llm is not None:
        await deps.llm.close()
    await deps.cache.close()
    if deps.db is not None:
        await deps.db.close()


def uvicorn_log_level(level: str) -> str:
    level = level.lower()
    return "warning" if level == "warn" else level


def build_lifespan(deps: Dependencies, index_enabled: bool = True):
    """Start the index worker and scheduler with the app, stop them with it."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger = deps.logger
        logger.info("Starting airport sentiment API...")
        if index_enabled:
            await deps.index.start()
        if deps.scheduler is not None:
            await deps.scheduler.start()
        logger.info("Airport sentiment API started successfully")
        try:
            yield
        finally:
            logger.info("Shutting down airport sentiment API...")
            if deps.scheduler is not None:
                await deps.scheduler.stop()
            await deps.index.stop()
            logger.info("Airport sentiment API stopped")

    return lifespan


async def main():
    """Main entry point for the API service."""
    app_config = load_config()
    deps = await init_dependencies(app_config)
    logger = deps.logger

    try:
        app = create_app(
            deps,
            cors_origins=app_config.api.cors_origins,
            root_path=app_config.api.root_path,
            lifespan=build_lifespan(deps, index_enabled=app_config.index.enabled),
        )
        server = uvicorn.Server(
            uvicorn.Config(
                app,
                host=app_config.api.host,
                port=app_config.api.port,
                log_level=uvicorn_log_level(app_config.logging.level),
            )
        )
        logger.info(f"Serving on {app_config.api.host}:{app_config.api.port}")
        await server.serve()
    except Exception as e:
        logger.exception(f"API service error: {e}")
        raise
    finally:
        await close_dependencies(deps)


def run():
    """Entry point for console script."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nShutdown complete")


if __name__ == "__main__":
    run()
