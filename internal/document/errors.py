"""Module-specific errors for document domain."""


class ErrInvalidInput(Exception):
    """Raised when input data is invalid."""
    pass


class ErrUnknownWeatherKind(Exception):
    """Raised when a weather kind has no backing collection."""
    pass


__all__ = [
    "ErrInvalidInput",
    "ErrUnknownWeatherKind",
]
