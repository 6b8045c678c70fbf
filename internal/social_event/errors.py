"""Module-specific errors for social_event domain."""


class ErrInvalidInput(Exception):
    """Raised when input data is invalid."""
    pass


__all__ = [
    "ErrInvalidInput",
]
