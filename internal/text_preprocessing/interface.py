from typing import Protocol, runtime_checkable

from .type import Input, Output


@runtime_checkable
class ITextProcessing(Protocol):
    """Protocol for text normalization."""

    def normalize(self, text: str) -> str:
        """Return cleaned text; idempotent."""
        ...

    def process(self, input_data: Input) -> Output:
        """Normalize and report what was removed."""
        ...


__all__ = ["ITextProcessing"]
