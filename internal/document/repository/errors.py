"""Domain repository errors for document."""


class RepositoryError(Exception):
    """Base exception for repository operations."""
    pass


class ErrFailedToCreate(RepositoryError):
    """Raised when insert operation fails."""
    pass


class ErrFailedToGet(RepositoryError):
    """Raised when select operation fails."""
    pass


__all__ = [
    "RepositoryError",
    "ErrFailedToCreate",
    "ErrFailedToGet",
]
