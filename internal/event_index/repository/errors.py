"""Domain repository errors for event_index."""


class RepositoryError(Exception):
    """Base exception for repository operations."""
    pass


class ErrFailedToUpsert(RepositoryError):
    """Raised when upsert operation fails."""
    pass


class ErrFailedToGet(RepositoryError):
    """Raised when select operation fails."""
    pass


__all__ = [
    "RepositoryError",
    "ErrFailedToUpsert",
    "ErrFailedToGet",
]
