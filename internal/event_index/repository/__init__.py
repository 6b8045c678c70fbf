"""Event Index Repository."""

from .interface import IEventIndexRepository
from .new import New, NewMemory
from .option import SearchOptions, UpsertOptions
from .errors import RepositoryError, ErrFailedToGet, ErrFailedToUpsert

__all__ = [
    "IEventIndexRepository",
    "New",
    "NewMemory",
    "SearchOptions",
    "UpsertOptions",
    "RepositoryError",
    "ErrFailedToGet",
    "ErrFailedToUpsert",
]
