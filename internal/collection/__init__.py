"""Collection Domain: platform agents, agent registry, collection runs and scheduling."""

from .interface import IAgent, IAgentManager, ICollectionUseCase
from .type import AgentContext, CollectionResult, Config, SchedulerConfig
from .errors import ErrCollectionFailed, ErrInvalidCredentials, ErrUnknownSource
from .usecase import (
    AgentManager,
    CollectionUseCase,
    New,
    NewAgentManager,
    NewScheduler,
    Scheduler,
)

__all__ = [
    # Interface
    "IAgent",
    "IAgentManager",
    "ICollectionUseCase",
    # Types
    "AgentContext",
    "CollectionResult",
    "Config",
    "SchedulerConfig",
    # Errors
    "ErrCollectionFailed",
    "ErrInvalidCredentials",
    "ErrUnknownSource",
    # Use case
    "AgentManager",
    "CollectionUseCase",
    "Scheduler",
    "New",
    "NewAgentManager",
    "NewScheduler",
]
