"""Domain repository errors for social_event."""


class RepositoryError(Exception):
    """Base exception for repository operations."""
    pass


class ErrFailedToCreate(RepositoryError):
    """Raised when insert operation fails."""
    pass


class ErrFailedToGet(RepositoryError):
    """Raised when select operation fails."""
    pass


class ErrFailedToDelete(RepositoryError):
    """Raised when delete operation fails."""
    pass


class ErrFailedToUpsert(RepositoryError):
    """Raised when upsert operation fails."""
    pass


class ErrInvalidData(RepositoryError):
    """Raised when input data is invalid."""
    pass


__all__ = [
    "RepositoryError",
    "ErrFailedToCreate",
    "ErrFailedToGet",
    "ErrFailedToDelete",
    "ErrFailedToUpsert",
    "ErrInvalidData",
]
