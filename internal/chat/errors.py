"""Module-specific errors for chat domain."""


class ErrInvalidInput(Exception):
    """Raised when the message is empty or too long."""
    pass


__all__ = ["ErrInvalidInput"]
