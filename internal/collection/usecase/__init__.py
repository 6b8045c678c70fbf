from .collection import CollectionUseCase
from .manager import AgentManager
from .scheduler import Scheduler
from .new import New, NewAgentManager, NewScheduler

__all__ = [
    "CollectionUseCase",
    "AgentManager",
    "Scheduler",
    "New",
    "NewAgentManager",
    "NewScheduler",
]
