"""Document Repository."""

from .interface import IDocumentRepository
from .new import New, NewMemory
from .option import CreateOptions, ListOptions
from .errors import RepositoryError, ErrFailedToCreate, ErrFailedToGet

__all__ = [
    "IDocumentRepository",
    "New",
    "NewMemory",
    "CreateOptions",
    "ListOptions",
    "RepositoryError",
    "ErrFailedToCreate",
    "ErrFailedToGet",
]
