from .event_index import EventIndex
from .new import New

__all__ = ["EventIndex", "New"]
