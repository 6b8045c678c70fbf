"""Module-specific errors for text_preprocessing domain."""


class ErrInvalidInput(Exception):
    """Raised when input is not text."""
    pass


__all__ = ["ErrInvalidInput"]
