"""Social Event Repository.

Exports:
- ISocialEventRepository: Repository interface
- Options: All option structs
- Errors: Domain repository errors
- New / NewMemory: Factory functions
"""

from .interface import ISocialEventRepository
from .new import New, NewMemory
from .option import (
    CreateOptions,
    UpsertManyOptions,
    ListOptions,
    DeleteOptions,
)
from .errors import (
    RepositoryError,
    ErrFailedToCreate,
    ErrFailedToGet,
    ErrFailedToDelete,
    ErrFailedToUpsert,
    ErrInvalidData,
)

__all__ = [
    "ISocialEventRepository",
    "New",
    "NewMemory",
    "CreateOptions",
    "UpsertManyOptions",
    "ListOptions",
    "DeleteOptions",
    "RepositoryError",
    "ErrFailedToCreate",
    "ErrFailedToGet",
    "ErrFailedToDelete",
    "ErrFailedToUpsert",
    "ErrInvalidData",
]
