"""Module-specific errors for collection domain."""


class ErrUnknownSource(Exception):
    """Raised when no agent is registered for a source name."""
    pass


class ErrInvalidCredentials(Exception):
    """Raised before any network call when a source lacks required credentials."""
    pass


class ErrCollectionFailed(Exception):
    """Raised when the upstream provider fails or returns an unusable payload."""
    pass


__all__ = [
    "ErrUnknownSource",
    "ErrInvalidCredentials",
    "ErrCollectionFailed",
]
