"""Module-specific errors for sentiment_analysis domain."""


class ErrInvalidInput(Exception):
    """Raised when input data is invalid."""
    pass


__all__ = ["ErrInvalidInput"]
