class ErrLLMUnavailable(Exception):
    """Raised when no API key is configured."""
    pass


class ErrLLMRequestFailed(Exception):
    """Raised when the provider call fails or returns nothing usable."""
    pass


__all__ = ["ErrLLMUnavailable", "ErrLLMRequestFailed"]
