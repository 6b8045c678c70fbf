"""Event Index Domain: background embedding queue and similarity search."""

from .interface import IEventIndex
from .type import Config, IndexEntry, IndexStatus
from .usecase import EventIndex, New

__all__ = [
    "IEventIndex",
    "Config",
    "IndexEntry",
    "IndexStatus",
    "EventIndex",
    "New",
]
