from typing import Dict, Optional

from pkg.logger.logger import Logger
from internal.collection.interface import IAgentManager, ICollectionUseCase
from internal.collection.type import AgentContext, SchedulerConfig
from internal.event_index import IEventIndex
from internal.social_event import ISocialEventUseCase
from ..agent import build_agents
from .collection import CollectionUseCase
from .manager import AgentManager
from .scheduler import AfterRunHook, Scheduler


def NewAgentManager(
    ctx: AgentContext,
    credentials: Optional[Dict[str, str]] = None,
) -> AgentManager:
    """Create the agent registry, seeding every agent with default credentials.

    Raises:
        ValueError: If ctx is None
    """
    if ctx is None:
        raise ValueError("ctx cannot be None")

    agents = build_agents(ctx)
    if credentials:
        for agent in agents.values():
            agent.set_credentials(credentials)
    return AgentManager(agents=agents, airport=ctx.airport, logger=ctx.logger)


def New(
    manager: IAgentManager,
    events: ISocialEventUseCase,
    index: Optional[IEventIndex] = None,
    logger: Optional[Logger] = None,
) -> CollectionUseCase:
    """Create a new collection use case.

    Raises:
        ValueError: If manager or events is None
    """
    if manager is None:
        raise ValueError("manager cannot be None")
    if events is None:
        raise ValueError("events cannot be None")

    return CollectionUseCase(manager=manager, events=events, index=index, logger=logger)


def NewScheduler(
    config: SchedulerConfig,
    collection: ICollectionUseCase,
    after_run: Optional[AfterRunHook] = None,
    logger: Optional[Logger] = None,
) -> Scheduler:
    """Create a scheduler for periodic collection.

    Raises:
        ValueError: If collection is None
    """
    if collection is None:
        raise ValueError("collection cannot be None")

    return Scheduler(config=config, collection=collection, after_run=after_run, logger=logger)


__all__ = ["New", "NewAgentManager", "NewScheduler"]
