"""Errors for the airport_config domain."""


class ErrConfigNotFound(Exception):
    """Raised when the airport config file does not exist."""
    pass


class ErrInvalidConfig(Exception):
    """Raised when the airport config file cannot be parsed or is incomplete."""
    pass


__all__ = [
    "ErrConfigNotFound",
    "ErrInvalidConfig",
]
